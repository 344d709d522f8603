from .base_enemy import Enemy
from .enemy_catalog import EnemyTemplate, load_enemy_templates
