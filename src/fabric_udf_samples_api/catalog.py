"""The static catalog of sample files per resource category and action."""

from typing import Final

from fabric_udf_samples_api.models.samples import ResourceCategory, SampleAction

CatalogKey = tuple[ResourceCategory, SampleAction]

CATALOG: Final[dict[CatalogKey, tuple[str, ...]]] = {
    (ResourceCategory.warehouse, SampleAction.all): (
        "Warehouse/export_warehouse_data_to_lakehouse.py",
        "Warehouse/query_data_from_warehouse.py",
    ),
    (ResourceCategory.warehouse, SampleAction.query): (
        "Warehouse/query_data_from_warehouse.py",
    ),
    (ResourceCategory.warehouse, SampleAction.write): (
        "Warehouse/export_warehouse_data_to_lakehouse.py",
    ),
    (ResourceCategory.lakehouse, SampleAction.all): (
        "Lakehouse/write_csv_file_in_lakehouse.py",
        "Lakehouse/read_csv_file_from_lakehouse.py",
        "Lakehouse/query_data_from_tables.py",
    ),
    (ResourceCategory.lakehouse, SampleAction.query): (
        "Lakehouse/read_csv_file_from_lakehouse.py",
        "Lakehouse/query_data_from_tables.py",
    ),
    (ResourceCategory.lakehouse, SampleAction.write): (
        "Lakehouse/write_csv_file_in_lakehouse.py",
    ),
    (ResourceCategory.sqldb, SampleAction.all): (
        "SQLDB/write_many_rows_to_sql_db.py",
        "SQLDB/write_one_row_to_sql_db.py",
        "SQLDB/read_from_sql_db.py",
    ),
    (ResourceCategory.sqldb, SampleAction.query): ("SQLDB/read_from_sql_db.py",),
    (ResourceCategory.sqldb, SampleAction.write): (
        "SQLDB/write_many_rows_to_sql_db.py",
        "SQLDB/write_one_row_to_sql_db.py",
    ),
    (ResourceCategory.variablelibrary, SampleAction.all): (
        "VariableLibrary/get_variables_from_library.py",
        "VariableLibrary/chat_completion_with_azure_openai.py",
    ),
    (ResourceCategory.datamanipulation, SampleAction.all): (
        "DataManipulation/manipulate_data_with_pandas.py",
        "DataManipulation/transform_data_with_numpy.py",
    ),
    (ResourceCategory.udfdatatypes, SampleAction.all): (
        "UDFDataTypes/use_userdatafunctioncontext.py",
        "UDFDataTypes/raise_userthrownerror.py",
    ),
}
"""Ordered sample files for every supported (category, action) pair."""


def resolve(
    category: ResourceCategory,
    action: SampleAction,
    filename: str | None = None,
) -> list[str]:
    """Resolves a request to the sample files it covers, in combination order.

    A 'specific' action returns the given filename as-is without consulting the
    catalog. Whether that file exists is only known once it is fetched.

    Returns:
        The file paths, or an empty list if the pair is not in the catalog.
    """
    if action is SampleAction.specific and filename:
        return [filename]
    return list(CATALOG.get((category, action), ()))
