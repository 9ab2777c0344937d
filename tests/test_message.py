import pytest

from wake.message import DataMessage
from wake.payload import EOF, DataBlock, Signal


def test_from_data_wraps_bare_data():
    data = [1, 2, 3]
    message = DataMessage.from_data(data)
    assert message.datablock().data is data
    assert message.datablock().metadata == {}


def test_from_data_keeps_existing_block():
    block = DataBlock(["x"], {"key": "value"})
    message = DataMessage.from_data(block)
    assert message.datablock() is block


def test_data_message_is_present():
    message = DataMessage.from_data("row")
    assert message.is_present() is True
    assert message.is_eof() is False


def test_eof_message():
    message = DataMessage.eof()
    assert message.is_eof() is True
    assert message.is_present() is False
    assert message.payload == EOF


def test_stop_message():
    message = DataMessage.stop()
    assert message.payload is Signal.STOP
    assert message.is_eof() is False
    assert message.is_present() is True


@pytest.mark.parametrize("message", [DataMessage.eof(), DataMessage.stop()])
def test_datablock_on_non_data_raises(message):
    with pytest.raises(ValueError):
        message.datablock()


def test_messages_compare_by_payload():
    message = DataMessage.from_data("a")
    assert message.datablock().data == "a"
    assert message == DataMessage.from_data("a")
    assert (message == DataMessage.eof()) is False
    assert (DataMessage.eof() == DataMessage.stop()) is False