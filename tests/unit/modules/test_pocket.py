"""
Unit tests for the pocket factory.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from hof import DomainValidationError, pocket

PROJECT_ROOT = Path(__file__).resolve().parents[3]


@pytest.mark.unit
@pytest.mark.domain
class TestPocket:
    """Test pocket(start) buy/sell/coins/trinkets."""

    def test_initial_state(self, sample_pocket):
        assert sample_pocket.coins() == 50
        assert sample_pocket.trinkets() == 0

    def test_buy_buy_sell(self, sample_pocket):
        # Act & Assert
        assert sample_pocket.buy() is True
        assert (sample_pocket.coins(), sample_pocket.trinkets()) == (40, 1)

        assert sample_pocket.buy() is True
        assert (sample_pocket.coins(), sample_pocket.trinkets()) == (30, 2)

        assert sample_pocket.sell() is True
        assert (sample_pocket.coins(), sample_pocket.trinkets()) == (35, 1)

    def test_sell_without_trinkets_is_refused(self, sample_pocket):
        # Act
        result = sample_pocket.sell()

        # Assert
        assert result is False
        assert sample_pocket.coins() == 50
        assert sample_pocket.trinkets() == 0

    def test_buy_without_enough_coins_is_refused(self):
        # Arrange
        p = pocket(25)
        p.buy()
        p.buy()

        # Act
        result = p.buy()

        # Assert
        assert result is False
        assert p.coins() == 5
        assert p.trinkets() == 2

    def test_exact_price_can_be_spent(self):
        p = pocket(10)

        assert p.buy() is True
        assert p.coins() == 0

    def test_never_negative_under_any_sequence(self):
        p = pocket(13)

        for op in [p.buy, p.buy, p.sell, p.sell, p.sell, p.buy, p.buy, p.buy]:
            op()
            assert p.coins() >= 0
            assert p.trinkets() >= 0

    def test_custom_prices(self):
        p = pocket(100, buy_price=30, sell_price=20)

        p.buy()
        p.sell()

        assert p.coins() == 90

    def test_fixed_prices_ignore_environment(self, monkeypatch, tmp_path, reload_config):
        # Arrange
        monkeypatch.setenv("POCKET_BUY_PRICE", "20")
        (tmp_path / ".env").write_text("POCKET_SELL_PRICE=8\n")
        monkeypatch.chdir(tmp_path)
        reload_config()

        # Act & Assert
        p = pocket(50)
        p.buy()
        assert (p.coins(), p.trinkets()) == (40, 1)
        p.buy()
        assert (p.coins(), p.trinkets()) == (30, 2)
        p.sell()
        assert (p.coins(), p.trinkets()) == (35, 1)

    def test_fresh_import_ignores_dotenv_and_production(self, tmp_path):
        # Arrange
        (tmp_path / ".env").write_text("POCKET_BUY_PRICE=25\n")
        env = dict(os.environ, ENVIRONMENT="production", POCKET_SELL_PRICE="20")
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")])
        )
        script = "from hof import pocket; p = pocket(50); p.buy(); print(p.coins(), p.trinkets())"

        # Act
        result = subprocess.run(
            [sys.executable, "-c", script],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
        )

        # Assert
        assert result.returncode == 0, result.stderr
        assert result.stdout.split() == ["40", "1"]

    @pytest.mark.parametrize("start", [-1, 1.5, None])
    def test_invalid_start_rejected(self, start):
        with pytest.raises(DomainValidationError) as exc_info:
            pocket(start)

        assert exc_info.value.field == "start"

    @pytest.mark.parametrize("price_field", ["buy_price", "sell_price"])
    def test_zero_price_rejected(self, price_field):
        with pytest.raises(DomainValidationError) as exc_info:
            pocket(10, **{price_field: 0})

        assert exc_info.value.field == price_field

    def test_instances_are_independent(self):
        a = pocket(50)
        b = pocket(50)

        a.buy()

        assert b.coins() == 50
        assert b.trinkets() == 0
