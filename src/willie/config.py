from dataclasses import dataclass

from .levels import Level


@dataclass
class WillieConfig:
    # strftime pattern for record timestamps; milliseconds appended via msec_format
    timestamp_format: str = "%H:%M:%S"
    msec_format: str = "%s.%03d"
    # Timestamp embedded in log_to_file_with_timestamp() filenames
    file_date_pattern: str = "%Y%m%d-%H%M"
    # Suffix given to files rolled over by the rolling transport
    rolling_date_pattern: str = "%Y-%m-%d"
    log_directory: str = "rotate"
    # Register a console transport when the facade is constructed
    log_to_console: bool = False
    indent_unit: str = "    "
    # Minimum level for the underlying logger and every transport
    level: Level = Level.INFO
    # Transport rendering
    colorize: bool = True
    json: bool = False


HR_WIDTH = 80
HR_CHAR = "-"
