"""Secret type classification.

Maps the declared ``type`` of a secret to the strategy used to decode its
values. Unknown types are decoded as plain base64.
"""

from kubectl_view_secret.models import DecodeStrategy, SecretType

_STRATEGIES: dict[str, DecodeStrategy] = {
    SecretType.OPAQUE: DecodeStrategy.PLAIN_BASE64,
    SecretType.TLS: DecodeStrategy.PLAIN_BASE64,
    SecretType.SSH_AUTH: DecodeStrategy.PLAIN_BASE64,
    SecretType.BASIC_AUTH: DecodeStrategy.PLAIN_BASE64,
    SecretType.SERVICE_ACCOUNT_TOKEN: DecodeStrategy.PLAIN_BASE64,
    SecretType.BOOTSTRAP_TOKEN: DecodeStrategy.PLAIN_BASE64,
    SecretType.HELM: DecodeStrategy.DOUBLE_BASE64_GZIP,
    SecretType.DOCKER_CFG: DecodeStrategy.JSON_PRETTY_PRINT,
    SecretType.DOCKER_CONFIG_JSON: DecodeStrategy.JSON_PRETTY_PRINT,
}


def classify(declared_type: str) -> DecodeStrategy:
    """Return the decode strategy for a declared secret type.

    Matching is exact and case-sensitive.

    Args:
        declared_type: The secret's ``type`` field, possibly empty.

    Returns:
        The strategy for known types, DecodeStrategy.PLAIN_BASE64 otherwise.

    """
    return _STRATEGIES.get(declared_type, DecodeStrategy.PLAIN_BASE64)
