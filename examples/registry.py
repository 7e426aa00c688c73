"""
Registry of available examples.
"""
from typing import List, TypedDict


class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    description: str


EXAMPLES: List[ExampleMetadata] = [
    # --- Basic ---
    {
        "path": "basic/00_targets_quickstart.py",
        "tags": ["basic", "targets"],
        "description": "Target access for arrays, sequences, tuples and subsets.",
    },
    {
        "path": "basic/01_label_index.py",
        "tags": ["basic", "labels"],
        "description": "Label index construction and class frequencies.",
    },

    # --- End-to-End ---
    {
        "path": "end_to_end/10_balance_pipeline.py",
        "tags": ["e2e", "resample"],
        "description": "Over- and undersampling feeding mini-batches over column-major features.",
    },
    {
        "path": "end_to_end/11_custom_storage.py",
        "tags": ["e2e", "storage"],
        "description": "Custom storage with native target access balanced without loading payloads.",
    },
]
