from block_dodger.agents.dodge_agent import DodgeAgent
from block_dodger.agents.observation_adapter import (
    LEFT_ACTION, RIGHT_ACTION, STAY_ACTION, get_observation_from_game_state,
)
from block_dodger.core.env import BlockDodgerEnv
from block_dodger.core.state.game_state import GameState


def observe(state):
    return get_observation_from_game_state(state)


def quiet_state():
    return GameState(width=7, height=8, spawn_probability=0.0)


def test_stays_when_nothing_falls():
    assert DodgeAgent().act(observe(quiet_state())) == STAY_ACTION


def test_leaves_column_about_to_be_hit():
    state = quiet_state()
    state.spawn_at(state.player.x, state.player.y - 1)
    assert DodgeAgent().act(observe(state)) in (LEFT_ACTION, RIGHT_ACTION)


def test_prefers_column_with_furthest_block():
    state = quiet_state()
    x, y = state.player.position
    state.spawn_at(x, y - 2)
    state.spawn_at(x - 1, y - 1)
    state.spawn_at(x + 1, y - 5)
    assert DodgeAgent().act(observe(state)) == RIGHT_ACTION


def test_does_not_step_off_board():
    state = quiet_state()
    state.player.x = 0
    state.spawn_at(0, state.player.y - 1)
    state.spawn_at(1, state.player.y - 1)
    assert DodgeAgent().act(observe(state)) == STAY_ACTION


def test_survives_longer_than_standing_still():
    def play(agent):
        env = BlockDodgerEnv({'width': 20, 'height': 12, 'max_episode_steps': 300})
        obs, _ = env.reset(seed=9)
        score = 0
        for _ in range(300):
            action = agent.act(obs) if agent else STAY_ACTION
            obs, _, terminated, truncated, info = env.step(action)
            score = info['score']
            if terminated or truncated:
                break
        return score

    assert play(DodgeAgent()) >= play(None)
