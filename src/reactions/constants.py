# Reactions module constants
import enum


class ReactionMode(str, enum.Enum):
    SET = "set"
    UNSET = "unset"
    TOGGLE = "toggle"
