from enum import Enum


class PoolKind(str, Enum):
    SKATERS = "skaters"
    TEAMS = "teams"
    # Add more pool types as needed
