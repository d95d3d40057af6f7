"""AWS client factory functions with connection pooling."""

import boto3
from functools import lru_cache
from typing import Any


@lru_cache(maxsize=4)
def get_bedrock_client(region_name: str) -> Any:
    """Get a cached Bedrock Runtime client instance for a region."""
    return boto3.client("bedrock-runtime", region_name=region_name)
