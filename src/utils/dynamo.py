"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key, Attr

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    This is the ONLY way to access DynamoDB in this project. Never instantiate
    DynamoDBClient directly. This ensures consistent table access across the codebase
    and proper error handling for missing configuration.

    Example:
        # Correct usage
        dynamo = get_dynamo()
        item = dynamo.get_item({"PK": "USER#123", "SK": "PROFILE"})

        # Incorrect usage - Don't do this
        # dynamo = DynamoDBClient(os.environ['WELLNESS_TABLE_NAME'])

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        EnvironmentError: If WELLNESS_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['WELLNESS_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "WELLNESS_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table, replacing any item with the same key.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        return response.get('Item')

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_condition: Optional[Key] = None,
        newest_first: bool = False,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Query items using partition key and optional sort key condition.

        Follows LastEvaluatedKey so callers always get the full result set
        unless a limit is given.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_condition: Optional sort key condition
            newest_first: Return items in descending sort key order
            limit: Optional maximum number of items

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_condition:
            key_condition = key_condition & sort_key_condition

        params: Dict[str, Any] = {
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": not newest_first
        }
        if limit:
            params["Limit"] = limit

        items: List[Dict[str, Any]] = []
        while True:
            response = self.table.query(**params)
            items.extend(response.get('Items', []))
            if limit and len(items) >= limit:
                return items[:limit]
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            params["ExclusiveStartKey"] = last_key

    def query_by_sort_key_prefix(
        self,
        partition_value: str,
        sort_key_prefix: str,
        newest_first: bool = False,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Query items in a partition whose sort key starts with a prefix.

        Args:
            partition_value: Value of the PK attribute
            sort_key_prefix: Prefix of the SK attribute, e.g. "ENTRY#"
            newest_first: Return items in descending sort key order
            limit: Optional maximum number of items

        Returns:
            List of matching items
        """
        return self.query_items(
            partition_key="PK",
            partition_value=partition_value,
            sort_key_condition=Key("SK").begins_with(sort_key_prefix),
            newest_first=newest_first,
            limit=limit
        )

    def query_by_sort_key_range(
        self,
        partition_value: str,
        sort_key_start: str,
        sort_key_end: str,
        newest_first: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Query items in a partition whose sort key lies between two bounds, inclusive.

        Args:
            partition_value: Value of the PK attribute
            sort_key_start: Lowest SK value to return
            sort_key_end: Highest SK value to return
            newest_first: Return items in descending sort key order

        Returns:
            List of matching items
        """
        return self.query_items(
            partition_key="PK",
            partition_value=partition_value,
            sort_key_condition=Key("SK").between(sort_key_start, sort_key_end),
            newest_first=newest_first
        )

    def scan_by_sort_key(self, sort_key: str) -> List[Dict[str, Any]]:
        """
        Scan the table for all items with a given sort key.

        Args:
            sort_key: Exact SK value, e.g. "PROFILE"

        Returns:
            List of matching items
        """
        params: Dict[str, Any] = {"FilterExpression": Attr("SK").eq(sort_key)}
        items: List[Dict[str, Any]] = []
        while True:
            response = self.table.scan(**params)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            params["ExclusiveStartKey"] = last_key

PROFILE_SK = "PROFILE"
CONTENT_PK = "CONTENT"
ENTRY_SK_PREFIX = "ENTRY#"
CHECKIN_SK_PREFIX = "CHECKIN#"
CONTENT_SK_PREFIX = "ITEM#"

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_checkin_sk(timestamp: str) -> str:
    """Create sort key for check-in logs from an ISO timestamp or date prefix."""
    return f"{CHECKIN_SK_PREFIX}{timestamp}"

# Sorts after every ISO timestamp
CHECKIN_SK_END = f"{CHECKIN_SK_PREFIX}~"

def create_recommendation_sk(date_str: str) -> str:
    """
    Create sort key for daily recommendations.

    One item per user and day; writing again for the same day replaces it.

    Args:
        date_str: ISO format date string the recommendations were generated for

    Returns:
        Sort key in format "REC#{date_str}"
    """
    return f"REC#{date_str}"
