"""
Scheduling Constants and Parameters

All tunable values for priority scoring, level thresholds and selection
live here.
"""

from enum import Enum


# ---- Item Types ----

class ItemType(str, Enum):
    """Kind of record a practice item was projected from."""
    WORD = "word"
    VERB = "verb"


class QuestionDirection(str, Enum):
    """Which side of the translation pair is shown."""
    TARGET_TO_SOURCE = "target-to-source"  # Show target text, ask for translation
    SOURCE_TO_TARGET = "source-to-target"  # Show translation, ask for target text


# ---- Effective Score ----

NEVER_PRACTICED_OFFSET = -1000  # Added to learning score of unseen items
DECAY_PERIOD_HOURS = 24         # One point of decay per full period
COUNT_BONUS_PER_PRACTICE = 2
COUNT_BONUS_CAP = 20


# ---- Answer Outcomes ----

CORRECT_SCORE_CHANGE = 5
INCORRECT_SCORE_CHANGE = -3
MIN_LEARNING_SCORE = 0


# ---- Difficulty Levels ----
# (upper bound exclusive, level); scores at or above the last bound are MAX_LEVEL

LEVEL_THRESHOLDS = (
    (5, 0),
    (15, 1),
    (30, 2),
    (50, 3),
)
MAX_LEVEL = 4

AUDIO_ONLY_MIN_LEVEL = 3     # Audio-only presentation possible from here on
AUTOPLAY_MAX_LEVEL = 3       # UI autoplays audio up to this level
LEVEL_4_AUDIO_PLAY_LIMIT = 1


# ---- Selection ----

SELECTION_WINDOW = 5  # Pick uniformly among this many top-priority items
