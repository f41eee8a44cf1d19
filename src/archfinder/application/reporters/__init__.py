"""Reporters for discovered component graphs."""

from archfinder.application.reporters.console import ConsoleConfig, ConsoleReporter
from archfinder.application.reporters.json_reporter import JSONReporter

__all__ = ["ConsoleConfig", "ConsoleReporter", "JSONReporter"]
