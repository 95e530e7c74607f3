from dataclasses import dataclass

@dataclass(frozen=True)
class GenConfig:
    # Viewport used for grid sizing when the caller gives none.
    viewport_width: int = 640
    viewport_height: int = 480
    # Per scanned empty cell, while below the coin target.
    coin_chance: float = 0.14
    # MUD cells in the gentle top rows turn to STONE with this chance.
    gentle_mud_chance: float = 0.5
    # Un-stitched entrance wanders up to +-jitter/2 columns from the middle.
    entrance_jitter: float = 4.0
    # Stitched entrance keeps the previous column with this chance, else shifts by one.
    stitch_stay_chance: float = 0.5

# Defaults shared by the generator and tools
DEFAULTS = GenConfig()
