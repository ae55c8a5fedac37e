"""
In-memory fakes for the vector I/O capabilities.

FakeVectorIO implements both IVectorReader and IVectorWriter. Opening a
payload reads its text: each <Placemark> becomes one feature, and a document
without placemarks has no layers. copy_layer writes the four Shapefile part
files with placeholder content and records every call for assertions.
"""

import os
from typing import Any, Dict, List, Optional, Set, Tuple

from exceptions import DatasetReadError, DatasetWriteError
from interfaces.vector_io import (
    IVectorDataSource,
    IVectorDataset,
    IVectorLayer,
    IVectorReader,
    IVectorWriter,
)

SHAPEFILE_PARTS = ("shp", "shx", "dbf", "prj")


class FakeLayer(IVectorLayer):

    def __init__(self, name: str, features: int):
        self._name = name
        self._features = features

    @property
    def name(self) -> str:
        return self._name

    @property
    def feature_count(self) -> int:
        return self._features


class FakeDataSource(IVectorDataSource):

    def __init__(self, path: str, features: int):
        self.path = path
        self.features = features
        self.closed = False

    @property
    def layer_count(self) -> int:
        return 1 if self.features else 0

    def get_layer(self, index: int) -> FakeLayer:
        if index >= self.layer_count:
            raise DatasetReadError(f"Layer index {index} out of range", input_path=self.path)
        return FakeLayer(os.path.splitext(os.path.basename(self.path))[0], self.features)

    def close(self) -> None:
        self.closed = True


class FakeDataset(IVectorDataset):

    def __init__(self, owner: "FakeVectorIO", output_dir: str, driver: str):
        self._owner = owner
        self._path = output_dir
        self.driver = driver

    @property
    def path(self) -> str:
        return self._path

    def copy_layer(
        self,
        source_layer: IVectorLayer,
        name: str,
        options: Optional[Dict[str, Any]] = None
    ) -> List[str]:
        self._owner.copies.append((self._path, name, source_layer.feature_count, dict(options or {})))
        if name in self._owner.fail_copy_for:
            raise DatasetWriteError(f"Simulated write failure for {name}")

        written = []
        for ext in SHAPEFILE_PARTS:
            part = os.path.join(self._path, f"{name}.{ext}")
            with open(part, "w", encoding="utf-8") as f:
                f.write(f"{source_layer.feature_count}\n")
            written.append(part)
        return written


class FakeVectorIO(IVectorReader, IVectorWriter):
    """
    Records calls:
        opened: payload paths passed to open()
        datasets: (output_dir, driver) passed to create_dataset()
        copies: (output_dir, name, feature_count, options) per copy_layer()
    """

    def __init__(self, fail_copy_for: Optional[Set[str]] = None):
        self.fail_copy_for = set(fail_copy_for or ())
        self.opened: List[str] = []
        self.sources: List[FakeDataSource] = []
        self.datasets: List[Tuple[str, str]] = []
        self.copies: List[Tuple[str, str, int, Dict[str, Any]]] = []

    def open(self, path: str, read_only: bool = True) -> FakeDataSource:
        self.opened.append(path)
        with open(path, "r", encoding="utf-8") as f:
            features = f.read().count("<Placemark>")
        source = FakeDataSource(path, features)
        self.sources.append(source)
        return source

    def create_dataset(self, output_dir: str, driver: str) -> FakeDataset:
        self.datasets.append((output_dir, driver))
        return FakeDataset(self, output_dir, driver)
