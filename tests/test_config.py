import pytest

from sta_advisor.config import DEFAULT_TIMEOUT, DEFAULT_URL_MARKER, Settings, load_settings
from sta_advisor.errors import ConfigurationError, ReportFetchError, StaAdvisorError


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings == Settings()
        assert settings.url_marker == DEFAULT_URL_MARKER
        assert settings.use_fallback is True
        assert settings.timeout == DEFAULT_TIMEOUT

    def test_all_values(self) -> None:
        settings = load_settings(
            {
                "STA_ADVISOR_BASE_URL": "https://reports.example.com/",
                "STA_ADVISOR_API_TOKEN": " abc ",
                "STA_ADVISOR_URL_MARKER": "/browse",
                "STA_ADVISOR_FALLBACK": "no",
                "STA_ADVISOR_TIMEOUT": "2.5",
            }
        )
        assert settings.base_url == "https://reports.example.com"
        assert settings.api_token == "abc"
        assert settings.url_marker == "/browse"
        assert settings.use_fallback is False
        assert settings.timeout == 2.5

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_fallback_truthy(self, value: str) -> None:
        assert load_settings({"STA_ADVISOR_FALLBACK": value}).use_fallback

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_timeout(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match="TIMEOUT"):
            load_settings({"STA_ADVISOR_TIMEOUT": value})

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STA_ADVISOR_API_TOKEN", "from-env")
        assert load_settings(dotenv=False).api_token == "from-env"

    def test_dotenv_file(
        self, tmp_path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text("STA_ADVISOR_BASE_URL=https://dotenv.example\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("STA_ADVISOR_BASE_URL", raising=False)
        try:
            assert load_settings().base_url == "https://dotenv.example"
        finally:
            monkeypatch.delenv("STA_ADVISOR_BASE_URL", raising=False)


class TestRequireCredentials:
    def test_complete(self) -> None:
        settings = Settings(base_url="https://h", api_token="t")
        assert settings.require_credentials() == ("https://h", "t")

    def test_missing_token(self) -> None:
        with pytest.raises(ConfigurationError, match="API_TOKEN"):
            Settings(base_url="https://h").require_credentials()

    def test_configuration_error_is_not_fetch_error(self) -> None:
        assert issubclass(ConfigurationError, StaAdvisorError)
        assert not issubclass(ConfigurationError, ReportFetchError)
