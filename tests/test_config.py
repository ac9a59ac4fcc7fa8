"""
Tests for environment-based configuration
"""

from securbank import config as config_module
from securbank.config import SecurBankConfig, get_config, reload_config


class TestSecurBankConfig:
    """Test configuration defaults and environment overrides"""

    def test_defaults(self, monkeypatch):
        """Test default values"""
        monkeypatch.delenv("SECURBANK_FORMS_OUTPUT_URL", raising=False)
        config = SecurBankConfig(_env_file=None)

        assert config.api_port == 8090
        assert config.log_format == "json"
        assert config.forms_output_url == ""
        assert config.forms_template_root == "/content/dam/securbank/forms"
        assert config.pdf_default_filename == "generated-document.pdf"
        assert config.pdf_max_transactions == 50
        assert config.statement_currency == "USD"

    def test_environment_override(self, monkeypatch):
        """Test SECURBANK_ prefixed variables override defaults"""
        monkeypatch.setenv("SECURBANK_FORMS_OUTPUT_URL", "http://forms.local:4502")
        monkeypatch.setenv("SECURBANK_PDF_MAX_TRANSACTIONS", "25")
        monkeypatch.setenv("securbank_log_level", "DEBUG")

        config = SecurBankConfig(_env_file=None)

        assert config.forms_output_url == "http://forms.local:4502"
        assert config.pdf_max_transactions == 25
        assert config.log_level == "DEBUG"

    def test_reload_config(self, monkeypatch):
        """Test reload picks up environment changes"""
        original = get_config()
        try:
            monkeypatch.setenv("SECURBANK_ISSUING_AUTHORITY", "Test Authority")
            reloaded = reload_config()

            assert reloaded.issuing_authority == "Test Authority"
            assert get_config() is reloaded
        finally:
            config_module.config = original
