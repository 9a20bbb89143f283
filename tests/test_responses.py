import pytest

from shottower.responses import (
    QueuedResponse,
    QueuedResponseData,
    RenderStatus,
    TemplateResponse,
    TemplateResponseData,
)
from shottower.schema import RequiredError


@pytest.mark.parametrize(
    "status, label",
    [
        (RenderStatus.QUEUED, "queue"),
        (RenderStatus.FETCHING, "fetching"),
        (RenderStatus.RENDERING, "rendering"),
        (RenderStatus.SAVING, "saving"),
        (RenderStatus.DONE, "done"),
        (RenderStatus.FAILED, "failed"),
        (RenderStatus.FETCHED, "fetched"),
        (RenderStatus.RENDERED, "rendered"),
        (RenderStatus.GENERATING, "generating"),
        (RenderStatus.GENERATED, "generated"),
    ],
)
def test_status_labels(status, label):
    assert str(status) == label
    assert status.label == label


def test_status_order_follows_lifecycle():
    ordered = sorted(RenderStatus)
    assert ordered[0] is RenderStatus.QUEUED
    assert RenderStatus(4) is RenderStatus.DONE
    assert [s.is_internal for s in ordered].count(True) == 4


def test_queued_data_missing_id():
    with pytest.raises(RequiredError) as info:
        QueuedResponseData(message="Render Successfully Queued").validate()
    assert info.value.schema == "Queued Response Data"
    assert info.value.field == "id"


def test_queued_data_missing_message():
    with pytest.raises(RequiredError) as info:
        QueuedResponseData(id="abc").validate()
    assert info.value.field == "message"


def test_queued_response_false_success_is_missing():
    response = QueuedResponse(
        success=False,
        message="Created",
        response=QueuedResponseData(message="queued", id="abc"),
    )
    with pytest.raises(RequiredError) as info:
        response.validate()
    assert info.value.schema == "Queued Response"
    assert info.value.field == "success"


def test_queued_response_empty_data_is_missing():
    with pytest.raises(RequiredError) as info:
        QueuedResponse(success=True, message="Created").validate()
    assert info.value.field == "response"


def test_queued_response_checks_nested_data():
    response = QueuedResponse(
        success=True, message="Created", response=QueuedResponseData(message="m")
    )
    with pytest.raises(RequiredError) as info:
        response.validate()
    assert info.value.schema == "Queued Response Data"
    assert info.value.field == "id"


def test_queued_response_to_dict():
    response = QueuedResponse(
        success=True, message="Created", response=QueuedResponseData("m", "abc")
    )
    assert response.to_dict() == {
        "success": True,
        "message": "Created",
        "response": {"message": "m", "id": "abc"},
    }


def test_template_response_checks_nested_data():
    response = TemplateResponse(
        success=True, message="Created", response=TemplateResponseData(id="t1")
    )
    with pytest.raises(RequiredError) as info:
        response.validate()
    assert info.value.schema == "Template Response Data"
    assert info.value.field == "message"


def test_template_response_missing_message():
    response = TemplateResponse(
        success=True, response=TemplateResponseData(message="m", id="t1")
    )
    with pytest.raises(RequiredError) as info:
        response.validate()
    assert info.value.schema == "Template Response"
    assert info.value.field == "message"


def test_template_response_to_dict_round_values():
    data = TemplateResponseData(message="saved", id="t1")
    response = TemplateResponse(success=True, message="Created", response=data)
    result = response.to_dict()
    assert result["response"] == data.to_dict()
    assert result["success"] is True