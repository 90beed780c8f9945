import hashlib
import hmac


def payment_signature(secret: str, order_id: str, payment_id: str) -> str:
    """Hex HMAC-SHA256 over ``order_id|payment_id``"""
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def verify_payment_signature(secret: str, order_id: str, payment_id: str, signature: str) -> bool:
    expected = payment_signature(secret, order_id, payment_id)
    return hmac.compare_digest(expected, signature or "")
