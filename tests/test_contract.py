import pytest

from opengradient_neuroml.artifacts.exceptions import MissingArtifact
from opengradient_neuroml.contracts import OGInferenceContract

from .conftest import TRANSFER_ABI


@pytest.fixture
def contract(write_artifact, artifacts_dir):
    write_artifact({"abi": TRANSFER_ABI, "bytecode": {"object": "0x6080604052"}})
    return OGInferenceContract(artifacts_dir)


def test_attributes(contract):
    assert contract.abi == TRANSFER_ABI
    assert contract.bytecode == "0x6080604052"


def test_missing_artifact(artifacts_dir):
    with pytest.raises(MissingArtifact):
        OGInferenceContract(artifacts_dir)


def test_names(contract):
    assert contract.function_names() == ["transfer", "infer"]
    assert contract.event_names() == ["Transfer"]


def test_lookups(contract):
    assert contract.get_function_abi("infer") == {"type": "function", "name": "infer", "inputs": []}
    assert contract.get_event_abi("Transfer")["anonymous"] is False

    with pytest.raises(ValueError, match="Function run not found in ABI"):
        contract.get_function_abi("run")
    with pytest.raises(ValueError, match="Event transfer not found in ABI"):
        contract.get_event_abi("transfer")


def test_signatures(contract):
    assert contract.function_signature("transfer") == "transfer(address,uint256)"
    assert contract.function_signature("infer") == "infer()"
    assert contract.event_signature("Transfer") == "Transfer(address,address,uint256)"


def test_selector_and_topic(contract):
    assert contract.function_selector("transfer") == "0xa9059cbb"
    assert contract.event_topic("Transfer") == (
        "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    )


def test_deployment_data(contract):
    assert contract.get_deployment_data() == {
        "bytecode": "0x6080604052",
        "abi": TRANSFER_ABI,
        "contract_name": "OGInference",
    }


def test_deployment_data_requires_bytecode(write_artifact, artifacts_dir):
    write_artifact({"abi": TRANSFER_ABI, "bytecode": "0x"})

    with pytest.raises(ValueError, match="no deployable bytecode"):
        OGInferenceContract(artifacts_dir).get_deployment_data()


def test_non_object_artifact(write_artifact, artifacts_dir):
    write_artifact("[]")

    contract = OGInferenceContract(artifacts_dir)

    assert contract.abi == []
    assert contract.function_names() == []
    with pytest.raises(ValueError):
        contract.get_deployment_data()
