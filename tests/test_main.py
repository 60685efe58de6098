"""
Command-Line Tests.

Tests for:
- --list
- Summary for one or all models
- --render and --export-json outputs
"""

import json
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from zoo import available_models


def test_list(capsys):
    """--list prints every model name."""
    print("=" * 60)
    print("TEST: --list")
    print("=" * 60)

    assert main.main(['--list']) == 0
    out = capsys.readouterr().out
    for name in available_models():
        assert name in out


def test_summary_all_models(capsys):
    """Default run summarizes every model."""
    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "Classifier Boundary Zoo" in out
    assert out.count("Accuracy:") == len(available_models())


def test_single_model_with_param(capsys):
    assert main.main(['--model', 'ridge', '--param', '10', '--confusion']) == 0
    out = capsys.readouterr().out
    assert "[ridge]" in out
    assert "Param:    10" in out
    assert "Confusion Matrix" in out


def test_unknown_model_exits():
    with pytest.raises(SystemExit):
        main.main(['--model', 'svm'])


def test_param_requires_model():
    with pytest.raises(SystemExit):
        main.main(['--param', '3'])


def test_render_and_export(tmp_path):
    """--render writes diagrams, --export-json writes every scene."""
    print("\n" + "=" * 60)
    print("TEST: --render / --export-json")
    print("=" * 60)

    out_dir = tmp_path / "out"
    json_path = tmp_path / "scenes" / "zoo.json"

    code = main.main(['--model', 'lda', '--render', str(out_dir),
                      '--export-json', str(json_path), '--regions'])
    assert code == 0
    assert (out_dir / "lda.svg").exists()

    with open(json_path) as f:
        data = json.load(f)
    assert list(data) == ['lda']
    assert 'direction' in data['lda']
    assert len(data['lda']['regions']) == 50


def test_bad_param_does_not_crash(capsys, caplog):
    """A non-numeric hyperparameter is reported, not raised."""
    assert main.main(['--model', 'logistic', '--param', 'abc']) == 1
    assert "No scenes generated" in capsys.readouterr().out
    assert "must be a number" in caplog.text

    assert main.main(['--model', 'perceptron', '--param', 'nan']) == 1
