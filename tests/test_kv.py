from wake.kv import KeyValue, KeyValueList


def test_can_create_kv():
    key = "mykey"
    value = "myvalue"
    record = KeyValue(key, value)
    assert record.key == key
    assert record.value == value


def test_list_from_single_pair():
    record = KeyValue("mykey", "myvalue")
    kv_list = KeyValueList.from_key_value(record)
    assert kv_list.data == [record]


def test_empty_list_by_default():
    assert KeyValueList().data == []