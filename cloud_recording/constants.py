AGORA_API_BASE_URL = "https://api.agora.io/v1/apps"

INDIVIDUAL_MODE = "individual"
MIX_MODE = "mix"
WEB_MODE = "web"
DEFAULT_RECORDING_MODE = MIX_MODE

RESOURCE_EXPIRED_HOUR = 24

MAX_IDLE_TIME = 30
STREAM_TYPES = 2  # audio + video
CHANNEL_TYPE = 1  # live broadcast
DECRYPTION_MODE = 1

INDIVIDUAL_SUBSCRIBE_GROUP = 3
INDIVIDUAL_FILE_TYPES = ["hls"]

MIXED_WIDTH = 1280
MIXED_HEIGHT = 720
MIXED_BITRATE = 2260
MIXED_FPS = 15
MIXED_LAYOUT = 1
MIXED_BACKGROUND_COLOR = "#000000"
MIXED_FILE_TYPES = ["hls", "mp4"]

DEFAULT_FILE_PREFIX_TIMEZONE = "America/Los_Angeles"
FILE_PREFIX_DATE_FORMAT = "%Y%m%d"
FILE_PREFIX_TIME_FORMAT = "%H%M%S"
MAX_TITLE_LENGTH = 64

DEFAULT_TOKEN_EXPIRE_SECONDS = 86400
MAX_TOKEN_EXPIRE_SECONDS = 86400

ROLE_PUBLISHER = 1
ROLE_SUBSCRIBER = 2
ROLE_RTM_USER = 1

MAX_UID = 2**31 - 1
