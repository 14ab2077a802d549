import json
from pathlib import Path

import pytest

from txref import cli


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("txref.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")
    for name in ("TXREF_NETWORK", "TXREF_HRP", "TXREF_FORCE_EXTENDED", "TXREF_OUTPUT", "TXREF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_encode_prints_txref(capsys):
    cli.main(["encode", "466793", "2205"])
    assert capsys.readouterr().out.strip() == "tx1:rjk0-uqay-z9l7-m9m"


def test_encode_testnet_extended(capsys):
    cli.main(["encode", "466793", "2205", "--txo-index", "3", "--testnet"])
    assert capsys.readouterr().out.strip() == "txtest1:8jk0-uqay-zrqq-ldt6-va"


def test_encode_uses_config_defaults(tmp_path: Path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("txref:\n  force_extended: true\n")

    cli.main(["--config", str(config_path), "encode", "466793", "2205"])

    assert capsys.readouterr().out.strip() == "tx1:yjk0-uqay-zqqq-hnlp-dm"


def test_decode_json_includes_commentary_for_legacy(capsys):
    cli.main(["--json", "decode", "tx1:rjk0-uqay-zsrw-hqe"])

    data = json.loads(capsys.readouterr().out)
    assert data["block_height"] == 466793
    assert data["transaction_position"] == 2205
    assert data["encoding"] == "bech32"
    assert "tx1:rjk0-uqay-z9l7-m9m" in data["commentary"]


def test_decode_text(capsys):
    cli.main(["decode", "rjk0-uqay-z9l7-m9m"])

    out = capsys.readouterr().out
    assert "txref: tx1:rjk0-uqay-z9l7-m9m" in out
    assert "network: main" in out
    assert "commentary" not in out


def test_classify(capsys):
    cli.main(["classify", "0" * 64])
    assert capsys.readouterr().out.strip() == "txid"


def test_limits(capsys):
    cli.main(["--json", "limits"])
    data = json.loads(capsys.readouterr().out)
    assert data["max_length"] == 30
    assert data["extended_length_no_hrp"] == 18


def test_errors_exit_with_code(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["encode", "16777216", "0"])

    assert excinfo.value.code == 1
    assert "error [range]" in capsys.readouterr().err


def test_bad_checksum_exits(capsys):
    with pytest.raises(SystemExit):
        cli.main(["decode", "tx1:rjk0-uqay-z9l7-m9n"])
    assert "error [checksum]" in capsys.readouterr().err


def test_configured_hrp_is_not_reused_for_other_network(tmp_path: Path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("txref:\n  hrp: tx\n")

    cli.main(["--config", str(config_path), "encode", "466793", "2205", "--testnet"])

    assert capsys.readouterr().out.strip() == "txtest1:xjk0-uqay-zghl-p89"


def test_configured_network_supplies_its_hrp(tmp_path: Path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("txref:\n  network: testnet\n")

    cli.main(["--config", str(config_path), "encode", "466793", "2205"])

    assert capsys.readouterr().out.strip() == "txtest1:xjk0-uqay-zghl-p89"


def test_rejected_hrp_exits_with_format_code(capsys):
    with pytest.raises(SystemExit):
        cli.main(["encode", "1", "2", "--hrp", "bc"])
    assert "error [format]" in capsys.readouterr().err
