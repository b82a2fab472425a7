"""
collision_manager.py
--------------------
Collision resolution between the player, tenants, envelopes and letters.

Responsibilities
----------------
- Cull tenants and envelopes that scrolled past the trailing edge.
- Resolve tenant <-> player contact (damage) before tenant <-> letter hits.
- Resolve letter <-> tenant hits (both removed, score awarded).
- Resolve envelope <-> player pickups (score awarded).

All tests run in screen space. Collections are walked by descending index
so removal never disturbs the entries still to be visited.
"""

from dataclasses import dataclass

from eviction.core.debug.debug_logger import DebugLogger
from eviction.systems.collision.aabb import rects_overlap


@dataclass
class CollisionReport:
    """What happened during one resolution pass."""
    player_hits: int = 0
    tenants_shot: int = 0
    tenants_culled: int = 0
    envelopes_collected: int = 0
    envelopes_culled: int = 0
    score_gained: int = 0

    @property
    def any_change(self) -> bool:
        return bool(self.player_hits or self.score_gained)


class CollisionManager:
    """Applies collision outcomes directly to the player and the collections."""

    def __init__(self, config):
        """
        Args:
            config (SimulationConfig): Score values and damage per hit
        """
        self.config = config
        DebugLogger.init_entry("CollisionManager")

    # ===========================================================
    # Tenants
    # ===========================================================

    def resolve_tenants(self, player, tenants: list, letters: list, camera,
                        report: CollisionReport = None) -> CollisionReport:
        """
        Cull, damage and shoot tenants for one tick.

        A tenant touching the player is consumed by that contact and never
        checked against letters in the same tick.
        """
        report = report or CollisionReport()

        for i in range(len(tenants) - 1, -1, -1):
            tenant = tenants[i]

            if tenant.is_past_trailing_edge(camera):
                del tenants[i]
                report.tenants_culled += 1
                continue

            tenant_rect = tenant.screen_rect(camera)

            if rects_overlap(player.rect, tenant_rect):
                del tenants[i]
                player.take_hit(self.config.damage_per_hit)
                report.player_hits += 1
                DebugLogger.action(f"Tenant hit player at screen x={tenant_rect[0]:.0f}", category="collision")
                continue

            for j in range(len(letters) - 1, -1, -1):
                letter = letters[j]
                if rects_overlap(letter.screen_rect(camera), tenant_rect):
                    del tenants[i]
                    del letters[j]
                    player.add_score(self.config.tenant_score)
                    report.tenants_shot += 1
                    report.score_gained += self.config.tenant_score
                    DebugLogger.action(
                        f"Letter served tenant (+{self.config.tenant_score})",
                        category="collision"
                    )
                    break

        return report

    # ===========================================================
    # Envelopes
    # ===========================================================

    def resolve_envelopes(self, player, envelopes: list, camera,
                          report: CollisionReport = None) -> CollisionReport:
        """Cull scrolled-off envelopes and collect those touching the player."""
        report = report or CollisionReport()

        for i in range(len(envelopes) - 1, -1, -1):
            envelope = envelopes[i]

            if envelope.is_past_trailing_edge(camera):
                del envelopes[i]
                report.envelopes_culled += 1
                continue

            if rects_overlap(player.rect, envelope.screen_rect(camera)):
                del envelopes[i]
                player.add_score(self.config.envelope_score)
                report.envelopes_collected += 1
                report.score_gained += self.config.envelope_score
                DebugLogger.trace(
                    f"Envelope collected (+{self.config.envelope_score})",
                    category="collision"
                )

        return report
