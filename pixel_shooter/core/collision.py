"""
Collision resolution
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config.constants import HEIGHT, SCORE_PER_KILL
from .geometry import boxes_overlap

if TYPE_CHECKING:
    from .game_state import SimulationState


@dataclass
class CollisionReport:
    """Outcome of one resolution pass"""
    kills: int = 0
    player_hit: bool = False


class CollisionResolver:
    """Brute-force pairwise checks followed by a single purge"""

    def resolve(self, state: 'SimulationState') -> CollisionReport:
        """
        Resolve bullet/enemy and player/enemy contacts for one frame.

        Flags destroyed entities, adds score for each kill, then drops flagged
        and off-screen entities once every pair has been tested.

        Args:
            state: the run being advanced; mutated in place

        Returns:
            Kill count and whether the player was struck
        """
        report = CollisionReport()
        player = state.player

        for bullet in player.bullets:
            for enemy in state.enemies:
                if bullet.to_remove or enemy.to_remove:
                    continue
                if boxes_overlap(bullet.box, enemy.box):
                    bullet.to_remove = True
                    enemy.to_remove = True
                    state.score += SCORE_PER_KILL
                    report.kills += 1

        player_box = player.box
        for enemy in state.enemies:
            if not enemy.to_remove and boxes_overlap(player_box, enemy.box):
                report.player_hit = True

        self.purge(state)
        return report

    @staticmethod
    def purge(state: 'SimulationState'):
        """Drop flagged entities and those that left the playfield"""
        state.player.bullets = [b for b in state.player.bullets
                                if not b.to_remove and b.y > 0]
        state.enemies = [e for e in state.enemies
                         if not e.to_remove and e.y < HEIGHT]
