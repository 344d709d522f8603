"""
frame_animator.py
-----------------
Tick-counted frame stepping shared by the player and enemies.

Looping animations wrap back to frame 0; one-shot animations (the player's
attack) stop on their last frame and report completion instead of wrapping.
"""


class FrameAnimator:
    """Frame index + timer for one sprite sequence."""

    __slots__ = ('frame_index', 'frame_timer', 'frame_delay')

    def __init__(self, frame_delay: int = 1):
        self.frame_index = 0
        self.frame_timer = 0
        self.frame_delay = max(1, frame_delay)

    def reset(self):
        self.frame_index = 0
        self.frame_timer = 0

    def _tick(self) -> bool:
        """Advance the timer; True when a frame step is due."""
        self.frame_timer += 1
        if self.frame_timer >= self.frame_delay:
            self.frame_timer = 0
            return True
        return False

    def advance_loop(self, frame_count: int):
        """Step a looping sequence: index = (index + 1) mod frame_count."""
        if frame_count <= 0:
            self.reset()
            return
        if self._tick():
            self.frame_index = (self.frame_index + 1) % frame_count
        elif self.frame_index >= frame_count:
            self.frame_index %= frame_count

    def advance_once(self, frame_count: int) -> bool:
        """
        Step a one-shot sequence.

        Returns:
            True once the last frame has been held for a full frame_delay
            (or immediately when the sequence is empty). The index is left
            on the last frame; callers reset on their state change.
        """
        if frame_count <= 0:
            return True
        if not self._tick():
            return False
        if self.frame_index >= frame_count - 1:
            return True
        self.frame_index += 1
        return False

    def __repr__(self):
        return f"<FrameAnimator frame={self.frame_index} timer={self.frame_timer}/{self.frame_delay}>"
