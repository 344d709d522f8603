"""
test_frame_animator.py
----------------------
Unit tests for looping and one-shot frame stepping.
"""

from diablolike.graphics.animations.frame_animator import FrameAnimator


def test_loop_steps_once_per_delay_and_wraps():
    animator = FrameAnimator(frame_delay=2)
    indices = []
    for _ in range(8):
        animator.advance_loop(3)
        indices.append(animator.frame_index)

    assert indices == [0, 1, 1, 2, 2, 0, 0, 1]


def test_loop_with_no_frames_stays_at_zero():
    animator = FrameAnimator(frame_delay=1)
    for _ in range(5):
        animator.advance_loop(0)
    assert animator.frame_index == 0


def test_loop_pulls_stale_index_back_in_range():
    animator = FrameAnimator(frame_delay=5)
    animator.frame_index = 7
    animator.advance_loop(4)
    assert 0 <= animator.frame_index < 4


def test_once_stops_on_last_frame_and_reports_finish():
    animator = FrameAnimator(frame_delay=2)
    results = [animator.advance_once(3) for _ in range(6)]

    assert results == [False, False, False, False, False, True]
    assert animator.frame_index == 2


def test_once_never_wraps():
    animator = FrameAnimator(frame_delay=1)
    for _ in range(20):
        animator.advance_once(4)
        assert animator.frame_index <= 3
    assert animator.frame_index == 3


def test_once_with_no_frames_finishes_immediately():
    assert FrameAnimator(5).advance_once(0)


def test_reset_zeroes_index_and_timer():
    animator = FrameAnimator(frame_delay=3)
    animator.advance_loop(4)
    animator.frame_index = 2
    animator.reset()
    assert (animator.frame_index, animator.frame_timer) == (0, 0)
