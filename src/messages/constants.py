# Messages module constants

NO_SUCH_MESSAGE = "No such message."
EMPTY_MESSAGE = "Empty message content"
MAX_MESSAGE_LENGTH = 5000
