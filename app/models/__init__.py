"""Document models — re-exports all models.

Import from here:  from app.models import Account, ...
Or from submodules: from app.models.account import Account
"""

# Accounts
from .account import Account, AddAccountInput  # noqa: F401

# Error logging
from .error_log import ErrorLog  # noqa: F401
