import hashlib
import hmac

from chapterhub.app.services.payment import payment_signature, verify_payment_signature


def test_signature_is_hmac_sha256_over_order_and_payment():
    expected = hmac.new(b"s3cret", b"order_9|pay_4", hashlib.sha256).hexdigest()

    assert payment_signature("s3cret", "order_9", "pay_4") == expected


def test_verify_rejects_tampered_fields():
    signature = payment_signature("s3cret", "order_9", "pay_4")

    assert verify_payment_signature("s3cret", "order_9", "pay_4", signature)
    assert not verify_payment_signature("s3cret", "order_9", "pay_5", signature)
    assert not verify_payment_signature("other", "order_9", "pay_4", signature)
    assert not verify_payment_signature("s3cret", "order_9", "pay_4", "")
