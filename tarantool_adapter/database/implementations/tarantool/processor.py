"""Post-processing of Tarantool SQL results."""

from typing import TYPE_CHECKING, Any

from tarantool_adapter.log import get_logger
from tarantool_adapter.types import DatabaseParamType, RecordType

from .results import SqlQueryResult, SqlUpdateResult

if TYPE_CHECKING:
    from .tarantool_connection import TarantoolConnection

logger = get_logger(__name__)


class TarantoolProcessor:
    """Reshapes raw results into the records callers work with."""

    def process_select(
        self, result: SqlQueryResult | SqlUpdateResult
    ) -> list[RecordType]:
        """Turn a result into records with lower-cased column names.

        An update result becomes a single ``{"info": affected_rows}`` record.
        """
        if isinstance(result, SqlUpdateResult):
            return [{"info": result.count}]

        return [
            {str(key).lower(): value for key, value in record.items()}
            for record in result
        ]

    def process_insert_get_id(
        self,
        connection: "TarantoolConnection",
        sql: str,
        values: DatabaseParamType,
    ) -> Any:
        """Run an insert and return the id generated for its first row.

        Args:
            connection: Connection to run the insert on
            sql: INSERT statement
            values: Positional parameters

        Returns:
            Generated id, as int when it is numeric

        Raises:
            ValueError: If the server reported no generated id
        """
        result = connection.insert(sql, values)
        ids = getattr(result, "autoincrement_ids", None)
        if not ids:
            raise ValueError(f"Insert generated no autoincrement id: {sql}")

        generated = ids[0]
        if isinstance(generated, (int, float)) and not isinstance(generated, bool):
            return int(generated)
        if isinstance(generated, str) and generated.strip().lstrip("-").isdigit():
            return int(generated)
        return generated

    def lower_metadata(self, metadata: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Lower-case every string value in column metadata."""
        return [
            {
                key: value.lower() if isinstance(value, str) else value
                for key, value in column.items()
            }
            for column in metadata
        ]
