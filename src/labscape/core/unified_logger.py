"""
Unified Logging System

Provides a centralized logger factory and formatting for every labscape module.
Command output goes to stdout through rich; log records go to stderr (and to an
optional log file) through the handlers configured here.

Features:
- Unified logger factory with consistent configuration
- Multiple output formats (legacy, structured, json, simple)
- Optional file handler next to the console handler
- Context-aware logging via thread-local context
"""

import sys
import logging
import threading
from pathlib import Path
from typing import Dict, Optional
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
import json

# Thread-local storage for logger contexts
_logger_context = threading.local()


class LogFormat(Enum):
    """Supported log output formats"""
    LEGACY = "legacy"          # [2025-09-05 02:26:35] * INFO: labscape: message
    STRUCTURED = "structured"  # [2025-09-05 02:26:35.150] [INFO] [component] message
    JSON = "json"              # {"timestamp": "...", "level": "INFO", "message": "..."}
    SIMPLE = "simple"          # INFO: message


@dataclass
class LoggerConfig:
    """Configuration for unified logger"""
    name: str
    level: int = logging.DEBUG

    # File output configuration
    file_path: Optional[Path] = None
    file_level: int = logging.DEBUG
    file_format: LogFormat = LogFormat.STRUCTURED

    # Console output configuration
    console_enabled: bool = True
    console_level: int = logging.WARNING
    console_format: LogFormat = LogFormat.SIMPLE

    component: Optional[str] = None


class LoggerFormatter(logging.Formatter):
    """Custom formatter supporting multiple output formats"""

    def __init__(self, format_type: LogFormat, component: Optional[str] = None):
        self.format_type = format_type
        self.component = component
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record based on configured format type"""
        context = getattr(_logger_context, 'context', {})

        if self.format_type == LogFormat.LEGACY:
            return self._format_legacy(record, context)
        elif self.format_type == LogFormat.STRUCTURED:
            return self._format_structured(record, context)
        elif self.format_type == LogFormat.JSON:
            return self._format_json(record, context)
        elif self.format_type == LogFormat.SIMPLE:
            return self._format_simple(record, context)
        else:
            return super().format(record)

    def _format_legacy(self, record: logging.LogRecord, context: Dict) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        return f"[{timestamp}] * {record.levelname}: labscape: {record.getMessage()}"

    def _format_structured(self, record: logging.LogRecord, context: Dict) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        component = self.component or context.get('component', record.name.split('.')[-1])

        message = record.getMessage()

        scenario = context.get('scenario')
        if scenario:
            message = f"[SCENARIO:{scenario}] {message}"

        base_msg = f"[{timestamp}] [{record.levelname}] [{component}] {message}"

        if context.get('metadata'):
            context_json = json.dumps(context['metadata'], indent=2, default=str)
            base_msg += f"\n  Context: {context_json}"

        return base_msg

    def _format_json(self, record: logging.LogRecord, context: Dict) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'component': self.component or record.name,
            'message': record.getMessage(),
            'logger': record.name,
        }
        log_data.update(context)

        return json.dumps(log_data, ensure_ascii=False, default=str)

    def _format_simple(self, record: logging.LogRecord, context: Dict) -> str:
        return f"{record.levelname}: {record.getMessage()}"


class UnifiedLogger:
    """
    Logger wrapper with context support and multiple output formats.
    Keyword arguments passed to the log methods are attached as metadata.
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self.logger = logging.getLogger(config.name)
        self.logger.setLevel(config.level)

        # Clear existing handlers to avoid duplication
        self.logger.handlers.clear()
        self.logger.propagate = False

        self._setup_handlers()
        self._component = config.component

    def _setup_handlers(self):
        """Set up file and console handlers with appropriate formatters"""
        if self.config.file_path:
            file_handler = logging.FileHandler(
                self.config.file_path,
                mode='a',
                encoding='utf-8'
            )
            file_handler.setLevel(self.config.file_level)
            file_handler.setFormatter(LoggerFormatter(self.config.file_format, self.config.component))
            self.logger.addHandler(file_handler)

        if self.config.console_enabled:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(self.config.console_level)
            console_handler.setFormatter(LoggerFormatter(self.config.console_format, self.config.component))
            self.logger.addHandler(console_handler)

    def debug(self, message: str, **kwargs):
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log_with_context(logging.ERROR, message, **kwargs)

    def _log_with_context(self, level: int, message: str, **kwargs):
        """Log with the thread-local context plus per-call metadata"""
        old_context = getattr(_logger_context, 'context', {}).copy()

        try:
            current_context = old_context.copy()
            if kwargs:
                current_context['metadata'] = kwargs
            if self._component:
                current_context['component'] = self._component

            _logger_context.context = current_context
            self.logger.log(level, message)

        finally:
            _logger_context.context = old_context


class LoggerFactory:
    """
    Centralized logger factory.
    Every module asks for its logger here so configuration stays consistent.
    """

    _loggers: Dict[str, UnifiedLogger] = {}
    _default_config: Optional[LoggerConfig] = None
    _lock = threading.Lock()

    @classmethod
    def set_default_config(cls, config: LoggerConfig):
        """Set default configuration and rebuild every cached logger with it"""
        with cls._lock:
            cls._default_config = config
            for key, existing in list(cls._loggers.items()):
                cls._loggers[key] = UnifiedLogger(cls._derive_config(existing.config.name,
                                                                     existing.config.component))

    @classmethod
    def _derive_config(cls, name: str, component: Optional[str]) -> LoggerConfig:
        if cls._default_config is None:
            return LoggerConfig(name=name, component=component or name.split('.')[-1])
        return replace(cls._default_config, name=name,
                       component=component or cls._default_config.component)

    @classmethod
    def get_logger(
        cls,
        name: str,
        component: Optional[str] = None,
        config: Optional[LoggerConfig] = None
    ) -> UnifiedLogger:
        """
        Get or create a unified logger for a specific component.

        Args:
            name: Logger name (typically __name__)
            component: Component name for logging context
            config: Optional custom configuration

        Returns:
            UnifiedLogger instance
        """
        with cls._lock:
            cache_key = f"{name}:{component or ''}"

            if cache_key not in cls._loggers:
                if config is None:
                    config = cls._derive_config(name, component)
                cls._loggers[cache_key] = UnifiedLogger(config)

            return cls._loggers[cache_key]

    @classmethod
    def configure(
        cls,
        level: str = "WARNING",
        log_format: LogFormat = LogFormat.SIMPLE,
        log_file: Optional[Path] = None
    ):
        """Configure console level/format and optional file output for all loggers"""
        cls.set_default_config(LoggerConfig(
            name="labscape",
            component=None,
            console_level=logging.getLevelName(level.upper()),
            console_format=log_format,
            file_path=log_file,
        ))

    @classmethod
    def reset(cls):
        """Reset logger factory (useful for testing)"""
        with cls._lock:
            cls._loggers.clear()
            cls._default_config = None


def get_logger(name: str, component: Optional[str] = None) -> UnifiedLogger:
    """Convenience function to get a logger"""
    return LoggerFactory.get_logger(name, component)


class LoggingContext:
    """Context manager for temporary logging context"""

    def __init__(self, **context_kwargs):
        self.context_kwargs = context_kwargs
        self.old_context = {}

    def __enter__(self):
        if hasattr(_logger_context, 'context'):
            self.old_context = _logger_context.context.copy()
        else:
            _logger_context.context = {}

        _logger_context.context.update(self.context_kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _logger_context.context = self.old_context


class ScenarioLoggingContext(LoggingContext):
    """Context manager tagging every record with the scenario being processed"""

    def __init__(self, scenario: str, component: str = "labscape"):
        super().__init__(scenario=scenario, component=component)
