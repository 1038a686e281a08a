"""
Player Statistics Models

In-memory statistics updated from terminal game summaries.
"""

from dataclasses import dataclass, field
from typing import Dict

from .game import GameSummary


@dataclass
class PlayerStats:
    """Player statistics data model."""
    games_played: int = 0
    games_won: int = 0
    total_guesses: int = 0
    average_guesses: float = 0.0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def win_percentage(self) -> int:
        if not self.games_played:
            return 0
        return round(100 * self.games_won / self.games_played)

    def record_game(self, summary: GameSummary) -> None:
        """Fold one finished game into the totals. Average covers won games only."""
        self.games_played += 1
        if summary.won:
            self.games_won += 1
            self.total_guesses += summary.attempts_used
            self.average_guesses = round(self.total_guesses / self.games_won, 2)
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
            self.guess_distribution[summary.attempts_used] = \
                self.guess_distribution.get(summary.attempts_used, 0) + 1
        else:
            self.current_streak = 0

    def to_dict(self) -> Dict:
        return {
            'games_played': self.games_played,
            'games_won': self.games_won,
            'win_percentage': self.win_percentage,
            'total_guesses': self.total_guesses,
            'average_guesses': self.average_guesses,
            'current_streak': self.current_streak,
            'max_streak': self.max_streak,
            'guess_distribution': {str(k): v for k, v in sorted(self.guess_distribution.items())}
        }
