from dataclasses import dataclass


@dataclass(slots=True)
class GameContext:
    """Host state the tracking system needs before it may sample buffs."""

    world_ready: bool = False
