"""GitBook API entity models.

Remote records carry more fields than are listed here; every model keeps the
unknown ones (``extra="allow"``) so nothing is lost when a record is parsed.
"""

from gitbook_mcp.models.api.change_requests import *
from gitbook_mcp.models.api.common import *
from gitbook_mcp.models.api.content import *
from gitbook_mcp.models.api.organizations import *
from gitbook_mcp.models.api.spaces import *
