"""Run artifacts: Parquet schemas, output paths and writers."""
