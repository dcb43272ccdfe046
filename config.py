"""
Configuration settings for the Argument Coach engine.

Thresholds and divisors below are the tuned values for the Spanish
indicator lexicon. Changing them shifts every score, so tests pin them.
"""
import os


# Logging settings
LOG_LEVEL = os.getenv("ARGUMENT_COACH_LOG_LEVEL", "standard")  # minimal | standard | verbose
VERBOSE = os.getenv("ARGUMENT_COACH_VERBOSE", "false").lower() in ("1", "true", "yes")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ScoringConfig:
    """Normalization divisors for indicator counts (score = min(count / divisor, 1))."""
    COHERENCE_DIVISOR = 3
    ORGANIZATION_DIVISOR = 2
    DEPTH_DIVISOR = 2
    BREADTH_DIVISOR = 3
    ARGUMENT_FLOW_DIVISOR = 3
    REASONING_DIVISOR = 3       # (connections - fallacies) / 3
    EVIDENCE_QUALITY_DIVISOR = 5
    SOURCE_DEPENDENCY_DIVISOR = 5
    CRITICAL_THINKING_DIVISOR = 5
    ORIGINALITY_DIVISOR = 5

    # Thesis clarity is binary until a graded signal exists
    THESIS_PRESENT_CLARITY = 0.8
    THESIS_ABSENT_CLARITY = 0.3

    # Placeholders for dimensions that need topic context we do not have
    TOPIC_RELEVANCE = 0.7
    CONSISTENCY = 0.7
    EVIDENCE_RELEVANCE = 0.7

    # A body is assumed once the text is longer than this many characters
    BODY_MIN_CHARS = 100


class ClassifierConfig:
    """Weakness/strength thresholds. The gap between the bands is a neutral zone."""
    THESIS_WEAK_BELOW = 0.6
    THESIS_STRONG_ABOVE = 0.8
    EVIDENCE_WEAK_BELOW = 2       # raw indicator count
    EVIDENCE_STRONG_AT_LEAST = 3  # raw indicator count
    SOURCE_DEPENDENCY_WEAK_ABOVE = 0.7
    ORIGINALITY_STRONG_ABOVE = 0.6
    REASONING_WEAK_BELOW = 0.6
    REASONING_STRONG_ABOVE = 0.8
    CRITICAL_THINKING_WEAK_BELOW = 0.5

    # Recommendation rule that has no weakness counterpart
    COHERENCE_RECOMMEND_BELOW = 0.6


class LearningStyleConfig:
    """Learning-style detection and adaptation settings."""
    MIN_DOMINANT_COUNT = 2          # below this the modality is undetermined
    DEFAULT_CONFIDENCE = 0.5        # used when the caller gives no confidence
    LOW_CONFIDENCE_THRESHOLD = 0.7  # below this, complementary bundles are added
    COMPLEMENTARY_WEIGHT = 0.3
    MIN_PRIMARY_WEIGHT = 0.4        # primary always outweighs complementary bundles
    BALANCED_WEIGHT = 0.5
    DEFAULT_ACTIVITY_TITLE = "Actividad de pensamiento crítico"
    DEFAULT_INCLUSIVE_TITLE = "Actividad Inclusiva"


class ProgressConfig:
    """Session trend settings."""
    WINDOW_SIZE = 3          # last 3 vs previous 3
    MIN_HISTORY = 2
    TREND_THRESHOLD = 0.1


class ClassMetricsConfig:
    """Class dashboard settings."""
    RECENT_DAYS = 7
    FULL_ACTIVITY_INTERACTIONS = 10  # interactions in RECENT_DAYS that count as progress 1.0
    INTERACTION_FETCH_LIMIT = 100
    IMPROVING_ABOVE = 0.7
    STABLE_ABOVE = 0.4
    NEEDS_ATTENTION_BELOW = 0.3
    TOP_PERFORMERS = 5
    SUMMARY_LIMIT = 10
    SUMMARY_RECENT = 5
