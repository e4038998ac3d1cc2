"""
Physics stages of the Paddle Court frame pipeline

Each stage is a pure function (state, settings) -> state. Reflection decisions
look at the ball's tentative next position computed from the pre-move
position, so the ball bounces when it is about to cross a boundary rather than
after it has crossed it.
"""

from collections.abc import Callable

from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState

PhysicsStage = Callable[[GameState, CourtSettings], GameState]


def check_collision(state: GameState, settings: CourtSettings) -> GameState:
    """Reflects the ball off the side walls and the top wall"""
    radius = settings.ball_radius
    next_x = state.ball_x + state.ball_vx
    next_y = state.ball_y + state.ball_vy

    vx = state.ball_vx
    if next_x > settings.court_width - radius or next_x < radius:
        vx = -vx

    vy = state.ball_vy
    if next_y < radius:
        vy = -vy

    return state.replace(ball_vx=vx, ball_vy=vy)


def paddle_covers(state: GameState, settings: CourtSettings) -> bool:
    """True when the ball centre is strictly within the paddle's horizontal span"""
    return state.paddle_x < state.ball_x < state.paddle_x + settings.paddle_width


def check_out_of_court(state: GameState, settings: CourtSettings) -> GameState:
    """Bounces the ball off the paddle, or ends the game when the paddle misses it"""
    next_y = state.ball_y + state.ball_vy
    if next_y <= settings.court_height - settings.ball_radius:
        return state

    if paddle_covers(state, settings):
        return state.replace(ball_vy=-state.ball_vy)
    return state.replace(is_over=True)


def move_paddle(state: GameState, settings: CourtSettings) -> GameState:
    """Moves the paddle one step per held direction, keeping it inside the court"""
    max_x = settings.paddle_max_x
    paddle_x = state.paddle_x

    # Both conditions read the pre-step position
    if state.right_held and state.paddle_x < max_x:
        paddle_x += settings.paddle_step
    if state.left_held and state.paddle_x > 0:
        paddle_x -= settings.paddle_step

    paddle_x = max(0.0, min(max_x, paddle_x))
    if paddle_x == state.paddle_x:
        return state
    return state.replace(paddle_x=paddle_x)


def move_ball(state: GameState, settings: CourtSettings) -> GameState:
    """Advances the ball by its velocity, the ball of a lost game stays put"""
    if state.is_over:
        return state
    return state.replace(
        ball_x=state.ball_x + state.ball_vx,
        ball_y=state.ball_y + state.ball_vy,
    )


# Fixed order of the physics part of a tick
PHYSICS_STAGES: tuple[PhysicsStage, ...] = (
    check_collision,
    check_out_of_court,
    move_paddle,
    move_ball,
)
