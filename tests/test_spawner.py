import random

from config import GameConfig
from quiz_state import SessionState
from spawner import Spawner


def test_spawns_immediately_then_waits_for_interval(config, rng, questions):
    spawner = Spawner(config, rng)
    state = SessionState(60)

    assert spawner.maybe_spawn(state, questions[0], now=10.0) is not None
    assert spawner.maybe_spawn(state, questions[0], now=11.0) is None
    assert spawner.maybe_spawn(state, questions[0], now=11.5) is None
    assert spawner.maybe_spawn(state, questions[0], now=11.6) is not None
    assert len(state.tokens) == 2


def test_no_spawn_on_tick_with_a_catch(config, rng, questions):
    spawner = Spawner(config, rng)
    state = SessionState(60)
    assert spawner.maybe_spawn(state, questions[0], now=0.0, item_hit=True) is None
    assert state.tokens == []
    # Next tick without a catch spawns
    assert spawner.maybe_spawn(state, questions[0], now=0.02) is not None


def test_no_spawn_after_termination(config, rng, questions):
    state = SessionState(60)
    state.terminated = True
    assert Spawner(config, rng).maybe_spawn(state, questions[0], now=0.0) is None


def test_token_geometry_within_bounds(rng, questions):
    config = GameConfig()
    spawner = Spawner(config, rng)
    for _ in range(200):
        token = spawner.spawn_token(questions[1])
        assert config.spawn_margin <= token.x <= config.playfield_width - token.width - config.spawn_margin
        assert token.y == -100
        assert 3.0 <= token.velocity_y <= 5.0
        assert (token.width, token.height) == config.token_size


def test_ids_are_unique(config, rng, questions):
    spawner = Spawner(config, rng)
    ids = {spawner.spawn_token(questions[0]).id for _ in range(500)}
    assert len(ids) == 500


def test_answer_selection_policy(config, questions):
    spawner = Spawner(config, random.Random(7))
    question = questions[2]
    tokens = [spawner.spawn_token(question) for _ in range(3000)]

    correct = [t for t in tokens if t.is_correct]
    wrong = [t for t in tokens if not t.is_correct]
    assert 0.55 < len(correct) / len(tokens) < 0.65
    assert all(t.text == question.correct_answer for t in correct)
    assert {t.text for t in wrong} == set(question.wrong_answers)
