from jquery_select.scope.service import ScopeManager
from jquery_select.scope.views import SelectionScope

__all__ = ['ScopeManager', 'SelectionScope']
