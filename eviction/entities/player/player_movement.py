"""
player_movement.py
------------------
Handles the player's vertical physics and run-cycle animation.

Responsibilities
----------------
- Integrate gravity into vertical velocity once per tick.
- Clamp the player onto the ground line and restore ground contact.
- Toggle the two-frame run animation on a wall-clock timer.
"""

ANIMATION_FRAMES = 2


def update_physics(player, gravity, ground_y):
    """
    Advance the player's vertical motion by one tick.

    Velocity and position are integrated per tick, not per second, so the
    jump arc is identical at any frame rate.

    Args:
        player (Player): The player instance being updated.
        gravity (float): Velocity added each tick (positive is downwards).
        ground_y (float): Screen y of the player's top edge when standing.
    """
    if not player.is_alive:
        return

    player.vy += gravity
    player.y += player.vy

    if player.y > ground_y:
        player.y = ground_y
        player.vy = 0
        player.on_ground = True


def update_animation(player, dt, frame_time):
    """
    Accumulate elapsed time and flip the run frame when it passes frame_time.

    Args:
        player (Player): The player instance being updated.
        dt (float): Delta time since the last frame (in seconds).
        frame_time (float): Seconds each frame stays on screen.
    """
    player.frame_timer += dt
    if player.frame_timer > frame_time:
        player.frame_timer = 0.0
        player.frame_index = (player.frame_index + 1) % ANIMATION_FRAMES
