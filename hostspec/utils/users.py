"""Current-user lookup used for default login names."""

import getpass
from collections.abc import Callable

CurrentUserProvider = Callable[[], str]


def get_login_name() -> str:
    """Get the login name of the user running this process.

    Looked up on every call so environment changes are honoured.

    <returns>
    Login name string
    </returns>
    """
    return getpass.getuser()
