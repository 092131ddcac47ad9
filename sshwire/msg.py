"""SSH message type numbers (RFC 4253, 4250, 4254, 4256, 5656)."""

# Transport layer generic messages.
DISCONNECT = 1
IGNORE = 2
UNIMPLEMENTED = 3
DEBUG = 4

SERVICE_REQUEST = 5
SERVICE_ACCEPT = 6
KEXINIT = 20
NEWKEYS = 21

# Elliptic-curve Diffie-Hellman key exchange.
KEX_ECDH_INIT = 30
KEX_ECDH_REPLY = 31

# User authentication.
USERAUTH_REQUEST = 50
USERAUTH_FAILURE = 51
USERAUTH_SUCCESS = 52
USERAUTH_BANNER = 53
USERAUTH_PK_OK = 60

# Keyboard-interactive authentication shares its number space with PK_OK.
USERAUTH_INFO_REQUEST = 60
USERAUTH_INFO_RESPONSE = 61

# Connection protocol: global requests.
GLOBAL_REQUEST = 80
REQUEST_SUCCESS = 81
REQUEST_FAILURE = 82

# Connection protocol: channels.
CHANNEL_OPEN = 90
CHANNEL_OPEN_CONFIRMATION = 91
CHANNEL_OPEN_FAILURE = 92
CHANNEL_WINDOW_ADJUST = 93
CHANNEL_DATA = 94
CHANNEL_EXTENDED_DATA = 95
CHANNEL_EOF = 96
CHANNEL_CLOSE = 97
CHANNEL_REQUEST = 98
CHANNEL_SUCCESS = 99
CHANNEL_FAILURE = 100