"""Constants for agentctl."""

# Subprocess timeouts (seconds)
AGENT_QUERY_TIMEOUT = 30
MAIL_TIMEOUT = 60
WHO_TIMEOUT = 5

# Fallback paths when neither config nor the agent provides one
DEFAULT_LOCK_FILE = "/var/lib/puppet/state/puppetdlock"
DEFAULT_PID_FILE = "/var/run/puppet/agent.pid"
OWNER_SUFFIX = ".owner"

DEFAULT_CONFIG_PATH = "/etc/agentctl/config.toml"
DEFAULT_MESSAGE = "Disabled by agentctl"

# Environment overrides
ENV_CONFIG = "AGENTCTL_CONFIG"
ENV_AGENT = "AGENTCTL_AGENT"
ENV_LOCK_FILE = "AGENTCTL_LOCK_FILE"
ENV_OWNER_FILE = "AGENTCTL_OWNER_FILE"
ENV_PID_FILE = "AGENTCTL_PID_FILE"
ENV_REPORT_TO = "AGENTCTL_REPORT_TO"
