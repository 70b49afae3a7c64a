from models import is_object_id, new_object_id


def test_new_object_id_shape():
    value = new_object_id()
    assert len(value) == 24
    assert is_object_id(value)
    assert value == value.lower()


def test_new_object_ids_sort_in_creation_order():
    ids = [new_object_id() for _ in range(50)]
    assert len(set(ids)) == 50
    assert ids == sorted(ids)


def test_is_object_id_rejects_non_hex():
    assert not is_object_id("z" * 24)
    assert not is_object_id("a" * 23)
    assert not is_object_id(None)
    assert not is_object_id("0" * 24 + "\n")
    assert is_object_id("ABCDEF0123456789abcdef01")
