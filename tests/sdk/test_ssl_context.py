import ssl

import pytest

from neople._utils._ssl_context import (
    create_ssl_context,
    expand_path,
    get_httpx_client_kwargs,
)


class TestExpandPath:
    @pytest.mark.parametrize("path", [None, ""])
    def test_empty(self, path):
        assert expand_path(path) == path

    def test_env_var_and_home(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", "/home/neople")
        monkeypatch.setenv("CERT_NAME", "ca.pem")

        assert expand_path("~/certs/$CERT_NAME") == "/home/neople/certs/ca.pem"

    def test_plain_path_unchanged(self):
        assert expand_path("/etc/ssl/cert.pem") == "/etc/ssl/cert.pem"


class TestSslContext:
    def test_create_ssl_context(self):
        assert isinstance(create_ssl_context(), ssl.SSLContext)

    def test_httpx_client_kwargs(self):
        kwargs = get_httpx_client_kwargs()

        assert isinstance(kwargs["verify"], ssl.SSLContext)
        assert kwargs["follow_redirects"] is True
        assert kwargs["timeout"] is None
