import json

import pytest


TRANSFER_ABI = [
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
        "anonymous": False,
    },
    {"type": "function", "name": "infer", "inputs": []},
]


@pytest.fixture
def artifacts_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def write_artifact(artifacts_dir):
    """Write OGInference.sol/OGInference.json under artifacts_dir."""

    def _write(content):
        path = artifacts_dir / "OGInference.sol" / "OGInference.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
