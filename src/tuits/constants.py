# Tuits module constants

# Error messages
NO_SUCH_TUIT = "No such tuit."
EMPTY_TUIT_CONTENT = "Empty tuit content"

TUIT_DESCRIPTION = "Text of the tuit"
