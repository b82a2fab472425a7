"""
test_collision_manager.py
-------------------------
Tests for tenant/envelope/letter collision resolution.

All scenarios use a camera offset of 300 so every position goes through
the world -> screen conversion. The player box is (100, 380, 80, 80).
"""

import pytest

from eviction.entities.bullets.letter import Letter
from eviction.entities.enemies.tenant import Tenant
from eviction.entities.items.envelope import Envelope
from eviction.entities.player.player_core import Player
from eviction.systems.collision.collision_manager import CollisionManager, CollisionReport
from eviction.systems.world.camera import Camera


OFFSET = 300.0


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def manager(config):
    return CollisionManager(config)


@pytest.fixture
def player(config):
    return Player(config.hero_screen_x, config.hero_ground_y, config.hero_size, config.start_lives)


@pytest.fixture
def camera():
    return Camera(offset=OFFSET)


def tenant_at(screen_x):
    return Tenant.on_ground(OFFSET + screen_x, 460, 80)


def letter_at(screen_x, y=410):
    return Letter(OFFSET + screen_x, y, 20, 8)


# ===========================================================
# Tenants
# ===========================================================

class TestTenantCollisions:

    def test_tenant_touching_player_costs_a_life(self, manager, player, camera):
        tenants = [tenant_at(120)]
        report = manager.resolve_tenants(player, tenants, [], camera)

        assert tenants == []
        assert player.lives == 2
        assert player.score == 0
        assert report.player_hits == 1

    def test_edge_contact_is_not_a_hit(self, manager, player, camera):
        tenants = [tenant_at(180)]
        manager.resolve_tenants(player, tenants, [], camera)
        assert len(tenants) == 1
        assert player.lives == 3

    def test_letter_serves_tenant(self, manager, player, camera):
        tenants = [tenant_at(400)]
        letters = [letter_at(410)]
        report = manager.resolve_tenants(player, tenants, letters, camera)

        assert tenants == [] and letters == []
        assert player.score == 20
        assert player.lives == 3
        assert report.tenants_shot == 1
        assert report.score_gained == 20

    def test_player_contact_wins_over_letter(self, manager, player, camera):
        tenants = [tenant_at(150)]
        letters = [letter_at(160)]
        manager.resolve_tenants(player, tenants, letters, camera)

        assert tenants == []
        assert len(letters) == 1
        assert player.lives == 2
        assert player.score == 0

    def test_one_letter_per_tenant(self, manager, player, camera):
        tenants = [tenant_at(400)]
        first, second = letter_at(405), letter_at(420)
        letters = [first, second]
        manager.resolve_tenants(player, tenants, letters, camera)

        # Reverse scan: the last letter in the list is consumed
        assert letters == [first]
        assert player.score == 20

    def test_letter_missing_vertically(self, manager, player, camera):
        tenants = [tenant_at(400)]
        letters = [letter_at(410, y=300)]
        manager.resolve_tenants(player, tenants, letters, camera)
        assert len(tenants) == 1 and len(letters) == 1

    def test_culls_tenants_past_trailing_edge(self, manager, player, camera):
        gone, kept = tenant_at(-81), tenant_at(-80)
        tenants = [gone, kept]
        report = manager.resolve_tenants(player, tenants, [], camera)

        assert tenants == [kept]
        assert report.tenants_culled == 1
        assert player.lives == 3

    def test_several_hits_in_one_pass(self, manager, player, camera):
        tenants = [tenant_at(110), tenant_at(130), tenant_at(500)]
        letters = [letter_at(505)]
        report = manager.resolve_tenants(player, tenants, letters, camera)

        assert tenants == []
        assert player.lives == 1
        assert player.score == 20
        assert report.any_change


# ===========================================================
# Envelopes
# ===========================================================

class TestEnvelopeCollisions:

    def test_pickup_awards_score(self, manager, player, camera):
        envelopes = [Envelope(OFFSET + 120, 380, 50, 50)]
        report = manager.resolve_envelopes(player, envelopes, camera)

        assert envelopes == []
        assert player.score == 10
        assert player.lives == 3
        assert report.envelopes_collected == 1

    def test_envelope_above_player_is_missed(self, manager, player, camera):
        envelopes = [Envelope(OFFSET + 120, 300, 50, 50)]
        manager.resolve_envelopes(player, envelopes, camera)
        assert len(envelopes) == 1
        assert player.score == 0

    def test_culls_envelopes_past_trailing_edge(self, manager, player, camera):
        envelopes = [Envelope(OFFSET - 60, 300, 50, 50)]
        report = manager.resolve_envelopes(player, envelopes, camera)
        assert envelopes == []
        assert report.envelopes_culled == 1

    def test_shares_report(self, manager, player, camera):
        report = CollisionReport()
        manager.resolve_tenants(player, [tenant_at(120)], [], camera, report)
        manager.resolve_envelopes(player, [Envelope(OFFSET + 120, 380, 50, 50)], camera, report)
        assert report.player_hits == 1
        assert report.score_gained == 10
