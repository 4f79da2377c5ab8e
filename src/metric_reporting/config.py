import os
from dataclasses import dataclass, field, fields
from typing import Any, FrozenSet, Literal, Mapping, Optional, get_args

from .exceptions import FilterConfigurationError
from .filtering import MatchMode, MetricFilter, RegexMatchingStrategy
from .filtering.policy import to_name_set

TimeUnit = Literal[
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
]
TIME_UNITS = get_args(TimeUnit)

_UNIT_SECONDS = {
    "nanoseconds": 1e-9,
    "microseconds": 1e-6,
    "milliseconds": 1e-3,
    "seconds": 1.0,
    "minutes": 60.0,
    "hours": 3600.0,
    "days": 86400.0,
}

# Keys accepted by from_dict in their original camelCase spelling
_CAMEL_CASE_KEYS = {
    "durationUnit": "duration_unit",
    "rateUnit": "rate_unit",
    "useRegexFilters": "use_regex_filters",
}


@dataclass
class ReporterConfig:
    """Configuration options shared by all scheduled metric reporters"""

    duration_unit: TimeUnit = "milliseconds"
    rate_unit: TimeUnit = "seconds"
    includes: FrozenSet[str] = field(default_factory=frozenset)
    excludes: FrozenSet[str] = field(default_factory=frozenset)
    use_regex_filters: bool = False
    # seconds or a duration string like "1 minute"; None defers to the reporter
    frequency: Optional[float] = None

    # Shared by every filter built from this config, so patterns compile once
    _regex_strategy: Optional[RegexMatchingStrategy] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Normalize name sets and validate configuration values"""
        self.includes = to_name_set(self.includes)
        self.excludes = to_name_set(self.excludes)
        self.duration_unit = self._validate_unit("duration_unit", self.duration_unit)
        self.rate_unit = self._validate_unit("rate_unit", self.rate_unit)
        self.use_regex_filters = self._parse_bool(
            "use_regex_filters", self.use_regex_filters
        )
        self.frequency = self._parse_frequency(self.frequency)

    @staticmethod
    def _validate_unit(name: str, value: str) -> str:
        unit = str(value).lower()
        if unit not in TIME_UNITS:
            raise FilterConfigurationError(
                f"Invalid value for '{name}': {value} "
                f"(expected one of {', '.join(TIME_UNITS)})"
            )
        return unit

    @staticmethod
    def _parse_bool(name: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() == "true"
        raise FilterConfigurationError(
            f"Invalid value for '{name}': {value!r} (expected a boolean)"
        )

    @staticmethod
    def _parse_frequency(value: Any) -> Optional[float]:
        """Convert seconds or a "<n> <unit>" duration string to seconds"""
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise FilterConfigurationError(f"Invalid value for 'frequency': {value!r}")

        if isinstance(value, str):
            amount, _, unit = value.strip().partition(" ")
            unit = unit.strip().lower() or "seconds"
            if not unit.endswith("s"):
                unit += "s"
            try:
                seconds = float(amount) * _UNIT_SECONDS[unit]
            except (ValueError, KeyError) as e:
                raise FilterConfigurationError(
                    f"Invalid value for 'frequency': {value!r} "
                    f"(expected seconds or '<n> <unit>' with unit one of "
                    f"{', '.join(TIME_UNITS)})"
                ) from e
        else:
            seconds = float(value)

        if not seconds > 0:
            raise FilterConfigurationError("frequency must be positive")
        return seconds

    @property
    def match_mode(self) -> MatchMode:
        return MatchMode.PATTERN if self.use_regex_filters else MatchMode.EXACT

    def get_filter(self) -> MetricFilter:
        """
        Build a filter that includes and excludes the configured metrics.

        Filtering works in 3 ways:

        - excludes only: all metrics are reported except those matching excludes
        - includes only: no metrics are reported except those matching includes
        - mixed: all metrics are reported except those matching excludes,
          unless they also match includes
        """
        strategy = None
        if self.use_regex_filters:
            if self._regex_strategy is None:
                self._regex_strategy = RegexMatchingStrategy()
            strategy = self._regex_strategy

        return MetricFilter(
            includes=self.includes,
            excludes=self.excludes,
            mode=self.match_mode,
            strategy=strategy,
        )

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def _parse_list_env(cls, key: str) -> FrozenSet[str]:
        """Parse comma-separated names from environment variable"""
        raw = os.getenv(key, "")
        return frozenset(item.strip() for item in raw.split(",") if item.strip())

    @classmethod
    def from_env(cls) -> "ReporterConfig":
        """Create configuration from environment variables"""
        return cls(
            duration_unit=os.getenv("METRICS_REPORTER_DURATION_UNIT", "milliseconds"),
            rate_unit=os.getenv("METRICS_REPORTER_RATE_UNIT", "seconds"),
            includes=cls._parse_list_env("METRICS_REPORTER_INCLUDES"),
            excludes=cls._parse_list_env("METRICS_REPORTER_EXCLUDES"),
            use_regex_filters=cls._parse_bool_env("METRICS_REPORTER_USE_REGEX_FILTERS"),
            frequency=os.getenv("METRICS_REPORTER_FREQUENCY") or None,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReporterConfig":
        """Create configuration from a mapping, e.g. a parsed YAML or JSON section"""
        allowed = {f.name for f in fields(cls) if f.init}
        kwargs = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in allowed:
                raise FilterConfigurationError(f"Unknown reporter option: {key}")
            kwargs[name] = value
        return cls(**kwargs)


_default_config: Optional[ReporterConfig] = None


def get_default_config() -> ReporterConfig:
    """Get the default reporter configuration"""
    global _default_config
    if _default_config is None:
        _default_config = ReporterConfig.from_env()
    return _default_config


def set_default_config(config: ReporterConfig) -> None:
    """Set the default reporter configuration"""
    global _default_config
    _default_config = config
