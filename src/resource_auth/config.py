"""Configuration keys and defaults for resource-auth.

Values are resolved through scitrera-app-framework ``Variables`` so that they can
be supplied explicitly (``v.set(...)``) or from the environment.
"""

# ============================================
# User Management Addon
# ============================================
RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER = 'RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER'
DEFAULT_RESOURCE_AUTH_USERNAME_REQUEST_PARAMETER = 'username'
RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER = 'RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER'
DEFAULT_RESOURCE_AUTH_PASSWORD_REQUEST_PARAMETER = 'password'

# ============================================
# Reserved resource names
# ============================================
SESSION_RESOURCE_TYPE = 'session'
USER_RESOURCE_TYPE = 'user'

# ============================================
# Service registry keys
# ============================================
SERVICE_ROLES = 'roles'
SERVICE_PERMISSIONS = 'permissions'

# ============================================
# Diagnostics
# ============================================
DIAGNOSTIC_UNSAFE_DEFAULT = 'unsafe-default'

# ============================================
# Extension points
# ============================================
EXT_APPLICATION = 'resource-auth-application'
EXT_USER_MANAGEMENT_ADDON = 'resource-auth-user-management-addon'
EXT_FASTAPI_SERVER = 'resource-auth-fastapi-server'
