"""
Testes para a configuração (config.py)
"""
from config import Settings


class TestSettings:
    def test_cors_origins_separadas_por_virgula(self, monkeypatch):
        """CORS_ORIGINS no formato 'a,b' não quebra o carregamento"""
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com")

        settings = Settings()

        assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]

    def test_cors_origins_padrao(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert Settings(CORS_ORIGINS="*").cors_origins == ["*"]

    def test_cors_origins_ignora_itens_vazios(self):
        assert Settings(CORS_ORIGINS="https://a.example.com,, ").cors_origins == ["https://a.example.com"]

    def test_dev_domain_usa_nome_configurado(self, monkeypatch):
        monkeypatch.setenv("MEU_DOMINIO_DEV", "dev.example.com")
        assert Settings(DEV_DOMAIN_ENV_VAR="MEU_DOMINIO_DEV").dev_domain == "dev.example.com"

    def test_is_development(self):
        assert Settings(ENVIRONMENT="production", DEBUG=False).is_development is False
        assert Settings(ENVIRONMENT="development").is_development is True
