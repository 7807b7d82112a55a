# Users module constants

# Password placeholders returned to clients instead of the stored hash
BLANK_PASSWORD = ""
MASKED_PASSWORD = "******"
