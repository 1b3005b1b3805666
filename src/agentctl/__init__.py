"""agentctl: operator control for a cron-scheduled configuration agent."""

__version__ = "0.1.0"
