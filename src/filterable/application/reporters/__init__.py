"""Reporters: FilterReport -> str."""

from filterable.application.reporters.console import ConsoleConfig, ConsoleReporter
from filterable.application.reporters.protocol import ReporterProtocol

__all__ = ["ConsoleConfig", "ConsoleReporter", "ReporterProtocol"]
