# Auth module constants

# Id of the logged in user inside the signed session cookie
SESSION_USER_ID_KEY = "user_id"

# Path value standing for the logged in user
ME_ALIAS = "me"

# Error messages
NO_USER_LOGGED_IN = "No user is logged in."
INCORRECT_CREDENTIAL = "Username and password do not match."

# Success messages
LOGOUT_SUCCESSFUL = "Logged out."
