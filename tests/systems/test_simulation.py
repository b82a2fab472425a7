"""
test_simulation.py
------------------
Scenario tests for the per-tick simulation.

Covers:
1. Camera and player scroll in lockstep
2. Jump round trip through apply_action()
3. Tenant contact, letter hits and envelope pickups inside a tick
4. Defeat freezes the run; restart starts a fresh one
5. Long seeded runs keep every invariant
"""

import random

import pytest

from eviction.core.runtime.game_settings import SimulationConfig
from eviction.core.runtime.main_loop import clamp_frame_time
from eviction.core.services.event_manager import (
    GameOverEvent,
    LivesChangedEvent,
    RunStartedEvent,
    ScoreChangedEvent,
)
from eviction.core.services.input_manager import Action
from eviction.entities.bullets.letter import Letter
from eviction.entities.enemies.tenant import Tenant
from eviction.entities.items.envelope import Envelope
from eviction.systems.simulation import Simulation


DT = 1 / 60


def tenant_on_screen_after_step(sim, screen_x):
    """A tenant that will sit at screen_x once the next step has scrolled."""
    world_x = sim.state.camera.offset + sim.config.world_speed + screen_x
    return Tenant.on_ground(world_x, sim.config.ground_line, sim.config.tenant_size)


# ===========================================================
# Scrolling & Jumping
# ===========================================================

class TestScrolling:

    def test_lockstep_advance(self, simulation):
        state = simulation.state
        for tick in range(1, 101):
            simulation.step(DT)
            assert state.camera.offset == state.player.world_x == tick * 3
        assert state.ticks == 100

    def test_quiet_config_spawns_nothing(self, simulation):
        for _ in range(600):
            simulation.step(DT)
        assert simulation.state.entity_counts() == {"tenants": 0, "envelopes": 0, "letters": 0}

    def test_jump_round_trip(self, simulation):
        player = simulation.state.player
        ground_y = simulation.config.hero_ground_y

        assert simulation.apply_action(Action.JUMP) is True
        assert simulation.apply_action(Action.JUMP) is False

        ticks = 0
        while not player.on_ground:
            simulation.step(DT)
            ticks += 1
            assert player.y <= ground_y
        assert ticks == 48
        assert player.y == ground_y
        assert simulation.apply_action(Action.JUMP) is True

    def test_unknown_action_ignored(self, simulation):
        assert simulation.apply_action("dance") is False

    def test_restart_ignored_while_alive(self, simulation):
        simulation.step(DT)
        assert simulation.apply_action(Action.RESTART) is False
        assert simulation.state.ticks == 1


# ===========================================================
# Collisions Inside a Tick
# ===========================================================

class TestTickCollisions:

    def test_tenant_contact(self, simulation, recorder):
        seen = recorder(LivesChangedEvent, ScoreChangedEvent)
        simulation.state.tenants.append(tenant_on_screen_after_step(simulation, 120))

        report = simulation.step(DT)

        assert report.player_hits == 1
        assert simulation.state.lives == 2
        assert simulation.state.score == 0
        assert simulation.state.tenants == []
        assert seen == [LivesChangedEvent(2)]

    def test_letter_serves_tenant(self, simulation, recorder):
        seen = recorder(ScoreChangedEvent)
        tenant = tenant_on_screen_after_step(simulation, 500)
        simulation.state.tenants.append(tenant)
        simulation.state.letters.append(Letter(tenant.x + 10, 400, 20, 8))

        simulation.step(DT)

        assert simulation.state.score == 20
        assert simulation.state.tenants == []
        assert simulation.state.letters == []
        assert seen == [ScoreChangedEvent(20, 20)]

    def test_thrown_letter_flies_and_hits(self, simulation):
        state = simulation.state
        tenant = tenant_on_screen_after_step(simulation, 400)
        state.tenants.append(tenant)

        assert simulation.apply_action(Action.FIRE) is True
        for _ in range(200):
            simulation.step(DT)
            if not state.tenants:
                break

        assert state.tenants == []
        assert state.letters == []
        assert state.score == 20
        assert state.lives == 3

    def test_envelope_pickup(self, simulation):
        cfg = simulation.config
        x = simulation.state.camera.offset + cfg.world_speed + 120
        simulation.state.envelopes.append(Envelope(x, cfg.hero_ground_y, 50, 50))

        simulation.step(DT)

        assert simulation.state.score == 10
        assert simulation.state.lives == 3
        assert simulation.state.envelopes == []

    def test_start_publishes_opening_values(self, simulation, recorder):
        seen = recorder(RunStartedEvent)
        simulation.start()
        assert seen == [RunStartedEvent(0, 3)]


# ===========================================================
# Defeat & Restart
# ===========================================================

@pytest.fixture
def last_life(events):
    config = SimulationConfig(
        start_lives=1, tenant_base_ms=50, envelope_base_ms=50,
        tenant_jitter_ms=0, envelope_jitter_ms=0,
    )
    return Simulation(config, rng=random.Random(5), events=events)


class TestDefeat:

    def test_defeat_freezes_everything(self, last_life, recorder):
        seen = recorder(GameOverEvent)
        state = last_life.state
        last_life.step(DT)
        state.tenants.append(tenant_on_screen_after_step(last_life, 120))
        last_life.step(DT)

        assert state.game_over
        assert state.lives == 0
        assert state.camera.active is False
        assert seen == [GameOverEvent(0, 6)]

        snapshot = (state.camera.offset, state.player.world_x, state.ticks,
                    state.score, state.entity_counts())
        for _ in range(120):
            report = last_life.step(DT)
            assert not report.any_change

        assert (state.camera.offset, state.player.world_x, state.ticks,
                state.score, state.entity_counts()) == snapshot
        assert len(seen) == 1

    def test_no_actions_after_defeat(self, last_life):
        state = last_life.state
        state.tenants.append(tenant_on_screen_after_step(last_life, 120))
        last_life.step(DT)

        assert last_life.apply_action(Action.JUMP) is False
        assert last_life.apply_action(Action.FIRE) is False
        assert state.letters == []
        assert state.player.on_ground

    def test_restart_after_defeat(self, last_life, recorder):
        seen = recorder(RunStartedEvent)
        last_life.state.tenants.append(tenant_on_screen_after_step(last_life, 120))
        last_life.step(DT)
        old_state = last_life.state
        assert old_state.camera.active is False

        assert last_life.apply_action(Action.RESTART) is True

        state = last_life.state
        assert state is not old_state
        assert state.camera is old_state.camera
        assert not state.game_over
        assert state.lives == 1 and state.score == 0
        assert state.camera.offset == 0 and state.camera.active
        assert last_life.spawn_manager.tenant_channel.accumulator == 0
        assert seen == [RunStartedEvent(0, 1)]

        last_life.step(DT)
        assert state.camera.offset == 3


# ===========================================================
# Invariants Over Long Runs
# ===========================================================

class TestInvariants:

    @pytest.mark.slow
    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_seeded_run_keeps_invariants(self, seed):
        config = SimulationConfig(
            tenant_base_ms=400, tenant_jitter_ms=300,
            envelope_base_ms=300, envelope_jitter_ms=200,
            start_lives=50,
        )
        sim = Simulation(config, rng=random.Random(seed))
        state = sim.state
        limit = config.viewport_width + config.letter_cleanup_margin
        last_score = 0

        for tick in range(3000):
            if tick % 7 == 0:
                sim.apply_action(Action.FIRE)
            if tick % 40 == 0:
                sim.apply_action(Action.JUMP)
            sim.step(DT)

            camera = state.camera
            assert camera.offset == state.player.world_x
            assert 0 <= state.lives <= config.start_lives
            assert state.score >= last_score
            assert state.game_over == (state.lives == 0)
            assert state.player.y <= config.hero_ground_y
            for entity in state.tenants + state.envelopes:
                assert not entity.is_past_trailing_edge(camera)
            for letter in state.letters:
                assert letter.screen_x(camera) <= limit
            last_score = state.score

        assert state.score > 0

    def test_same_seed_same_run(self):
        def run(seed):
            config = SimulationConfig(tenant_base_ms=200, envelope_base_ms=150)
            sim = Simulation(config, rng=random.Random(seed))
            for _ in range(600):
                sim.step(DT)
            return [(t.x, t.y) for t in sim.state.tenants], [(e.x, e.y) for e in sim.state.envelopes]

        assert run(11) == run(11)

    def test_slow_letters_never_pile_up(self):
        config = SimulationConfig(letter_speed=1, tenant_base_ms=1e12, envelope_base_ms=1e12)
        sim = Simulation(config, rng=random.Random(0))
        camera = sim.state.camera

        for _ in range(1000):
            sim.apply_action(Action.FIRE)
            sim.step(DT)
            for letter in sim.state.letters:
                assert not letter.is_past_trailing_edge(camera)

        # Each letter drifts left 2 px per tick and is gone within 56 ticks
        assert 0 < len(sim.state.letters) <= 60

    def test_quiet_tick_publishes_nothing(self, simulation, recorder):
        seen = recorder(ScoreChangedEvent, LivesChangedEvent, GameOverEvent)
        for _ in range(30):
            simulation.step(DT)
        assert seen == []


# ===========================================================
# Frame Clamp
# ===========================================================

@pytest.mark.parametrize("frame_time, expected", [
    (0.016, 0.016),
    (0.1, 0.1),
    (5.0, 0.1),
    (-0.01, 0.0),
])
def test_clamp_frame_time(frame_time, expected):
    assert clamp_frame_time(frame_time) == expected
