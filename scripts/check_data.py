#!/usr/bin/env python3
"""
Simple script to check the source tables of the PCM catalog
"""

import sys
from pathlib import Path

from tabulate import tabulate

project_root = Path(__file__).parent.parent
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pcm_explorer.config import get_explorer_config
from pcm_explorer.parsing import PCM_NUMERIC_COLUMNS, parse_pcm_table, parse_property_table
from pcm_explorer.storage import PcmCatalog, PropertyModelCatalog


def check_data():
    config = get_explorer_config()

    pcm_path = project_root / config["pcm_catalog_path"]
    property_path = project_root / config["property_data_path"]

    catalog = PcmCatalog(parse_pcm_table(pcm_path.read_text(encoding="utf-8"), config["delimiter"]))
    properties = PropertyModelCatalog(
        parse_property_table(property_path.read_text(encoding="utf-8"), config["delimiter"])
    )

    df = catalog.to_dataframe()
    print(f"PCM catalog: {len(catalog)} records, columns: {', '.join(df.columns)}")

    numeric = [column for column in df.columns if column in PCM_NUMERIC_COLUMNS]
    missing = df[numeric].isna().sum()
    print("\nMissing numeric values:")
    print(tabulate(missing.items(), headers=["Column", "Missing"]))

    print(f"\nProperty definitions: {len(properties)}")
    invalid = properties.invalid_definitions()
    if invalid:
        print("Invalid definitions:")
        for definition in invalid:
            print(f"  {definition.pcm_id} / {definition.property_type}")

    without_curves = [pcm_id for pcm_id in catalog.ids() if not properties.for_pcm(pcm_id)]
    if without_curves:
        print(f"\nPCMs without property definitions: {', '.join(without_curves)}")

    unknown = [pcm_id for pcm_id in properties.distinct_pcm_ids() if catalog.get(pcm_id) is None]
    if unknown:
        print(f"Definitions referencing unknown PCMs: {', '.join(unknown)}")


if __name__ == "__main__":
    check_data()
