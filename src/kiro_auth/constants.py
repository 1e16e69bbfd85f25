"""Constants used throughout the Kiro token identity helpers."""

# Token cache filenames: kiro-<method>[-<identity>].json
TOKEN_FILE_PREFIX = "kiro"
TOKEN_FILE_EXTENSION = ".json"
UNKNOWN_AUTH_METHOD = "unknown"

# Only IDC logins fall back to the start URL for identity
AUTH_METHOD_IDC = "idc"

# IAM Identity Center start URLs look like https://<identifier>.awsapps.com/start
IDC_START_URL_DOMAIN = "awsapps.com"

# Token cache directory
DEFAULT_TOKEN_DIR = "~/.cli-proxy-api"
TOKEN_DIR_ENV_VAR = "KIRO_TOKEN_DIR"
TOKEN_FILE_PREFIX_ENV_VAR = "KIRO_TOKEN_FILE_PREFIX"
