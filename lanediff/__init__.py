"""Lane Diff - lane matchup influence scoring for League of Legends timelines."""

__version__ = "0.3.0"
