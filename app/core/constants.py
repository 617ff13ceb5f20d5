# --------------------------------
# ARITHMETIC CONSTANTS
# --------------------------------

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# --------------------------------
# DEPARTMENT CONSTANTS
# --------------------------------

DEPARTMENT_NAME_MAX_LENGTH = 100
DEPARTMENT_DESCRIPTION_MAX_LENGTH = 500

DEPARTMENT_NAME_REQUIRED_MSG = "Department name cannot be null or empty."
DEPARTMENT_NAME_TOO_LONG_MSG = (
    f"Department name cannot exceed {DEPARTMENT_NAME_MAX_LENGTH} characters."
)
DEPARTMENT_DESCRIPTION_TOO_LONG_MSG = (
    f"Department description cannot exceed {DEPARTMENT_DESCRIPTION_MAX_LENGTH} characters."
)
