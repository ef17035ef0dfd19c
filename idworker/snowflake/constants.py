SEQUENCE_BITS = 12
WORKER_ID_BITS = 5
DATACENTER_ID_BITS = 5
TIMESTAMP_BITS = 41

MAX_SEQ = (1 << SEQUENCE_BITS) - 1
MAX_WORKER_ID = (1 << WORKER_ID_BITS) - 1
MAX_DATACENTER_ID = (1 << DATACENTER_ID_BITS) - 1
MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1

WORKER_ID_SHIFT = SEQUENCE_BITS
DATACENTER_ID_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS
TIMESTAMP_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS + DATACENTER_ID_BITS

MAX_SNOWFLAKE = (1 << (TIMESTAMP_SHIFT + TIMESTAMP_BITS)) - 1

# 2014-05-13T01:06:42.863Z
DEFAULT_EPOCH = 1399943202863
