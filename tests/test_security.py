from user_service.core import hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("admin123")
    second = hash_password("admin123")

    assert first != second
    assert first.startswith("$2")


def test_verify_password():
    stored = hash_password("admin123")

    assert verify_password("admin123", stored)
    assert not verify_password("wrong", stored)


def test_verify_rejects_plaintext_rows():
    assert not verify_password("admin123", "admin123")
