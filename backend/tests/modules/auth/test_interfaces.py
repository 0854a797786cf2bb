from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService
from tests.fakes import InMemoryUserRepository


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define required methods."""
        for method in ["register", "login", "load_user"]:
            assert hasattr(IAuthService, method)

    def test_service_satisfies_protocol(self):
        """AuthService instances should pass the runtime protocol check."""
        service = AuthService(users=InMemoryUserRepository())
        assert isinstance(service, IAuthService)
