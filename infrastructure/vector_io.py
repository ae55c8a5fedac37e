# ============================================================================
# VECTOR I/O ADAPTER - GEOPANDAS / PYOGRIO
# ============================================================================
# PURPOSE: Implements the vector read/write capabilities with geopandas
#          (pyogrio engine): open a KML, read its first layer, write the
#          layer out as an ESRI Shapefile
# EXPORTS: register_drivers, GeoPandasLayer, GeoPandasDataSource,
#          GeoPandasDataset, GeoPandasVectorIO
# DEPENDENCIES: geopandas, pyogrio, util_logger, exceptions, interfaces
# ============================================================================
"""
GeoPandas Vector I/O Adapter.

Reading:
    GeoPandasVectorIO.open(kml_path) lists the layers with
    geopandas.list_layers and reads a layer on demand with
    geopandas.read_file(path, layer=name).

Writing:
    GeoPandasVectorIO.create_dataset(out_dir, "ESRI Shapefile") returns a
    dataset; copy_layer(layer, "20-006") writes out_dir/20-006.shp plus its
    .shx/.dbf/.prj (and .cpg) siblings via GeoDataFrame.to_file.

Driver registration:
    register_drivers() is the one-time process setup. It checks that the
    installed GDAL build behind pyogrio can read KML and write the output
    driver, and fails fast with ConfigurationError otherwise.
"""

import glob
import os
import time
from typing import Any, Dict, Iterable, List, Optional, Set

import geopandas as gpd
import pyogrio

from exceptions import (
    ConfigurationError,
    ContractViolationError,
    DatasetReadError,
    DatasetWriteError,
)
from interfaces.vector_io import (
    IVectorDataSource,
    IVectorDataset,
    IVectorLayer,
    IVectorReader,
    IVectorWriter,
)
from util_logger import LoggerFactory, ComponentType


logger = LoggerFactory.create_logger(ComponentType.ADAPTER, "GeoPandasVectorIO")


# GDAL ships KML read support as either the KML or the LIBKML driver
KML_DRIVERS = ("KML", "LIBKML")

# File extension written for each supported output driver
DRIVER_EXTENSIONS: Dict[str, str] = {
    "ESRI Shapefile": "shp",
    "GPKG": "gpkg",
    "GeoJSON": "geojson",
    "FlatGeobuf": "fgb",
}

_registered_drivers: Set[str] = set()


def register_drivers(output_drivers: Iterable[str] = ("ESRI Shapefile",)) -> None:
    """
    One-time driver check for the process.

    Idempotent: drivers already confirmed are not checked again.

    Args:
        output_drivers: Drivers that must support writing

    Raises:
        ConfigurationError: If KML reading or an output driver is unavailable
    """
    output_drivers = tuple(output_drivers)
    wanted = set(output_drivers) | {"KML"}
    if wanted <= _registered_drivers:
        return

    available = pyogrio.list_drivers()
    logger.debug(f"GDAL {pyogrio.__gdal_version_string__} exposes {len(available)} vector drivers")

    if "KML" not in _registered_drivers:
        if not any('r' in available.get(name, '') for name in KML_DRIVERS):
            raise ConfigurationError(
                f"No KML read driver available (looked for {list(KML_DRIVERS)})"
            )
        _registered_drivers.add("KML")

    for driver in output_drivers:
        if driver in _registered_drivers:
            continue
        if driver not in DRIVER_EXTENSIONS:
            raise ConfigurationError(
                f"Unsupported output driver '{driver}'. "
                f"Supported: {sorted(DRIVER_EXTENSIONS)}"
            )
        if 'w' not in available.get(driver, ''):
            raise ConfigurationError(f"GDAL driver '{driver}' cannot write on this installation")
        _registered_drivers.add(driver)

    logger.info(f"Vector drivers registered: {sorted(_registered_drivers)}")


# ============================================================================
# READ SIDE
# ============================================================================

class GeoPandasLayer(IVectorLayer):
    """
    A layer read into memory as a GeoDataFrame.
    """

    def __init__(self, name: str, frame: gpd.GeoDataFrame):
        self._name = name
        self.frame = frame

    @property
    def name(self) -> str:
        return self._name

    @property
    def feature_count(self) -> int:
        return len(self.frame)


class GeoPandasDataSource(IVectorDataSource):
    """
    An opened vector file. Layers are listed up front and read on demand.
    """

    def __init__(self, path: str):
        self.path = path
        try:
            layers = gpd.list_layers(path)
        except Exception as e:
            raise DatasetReadError(f"Error opening {path}: {e}", input_path=path) from e
        self._layer_names: List[str] = [str(name) for name in layers["name"]]
        logger.debug(f"Opened {path}: layers {self._layer_names}")

    @property
    def layer_names(self) -> List[str]:
        return list(self._layer_names)

    @property
    def layer_count(self) -> int:
        return len(self._layer_names)

    def get_layer(self, index: int) -> GeoPandasLayer:
        if not 0 <= index < len(self._layer_names):
            raise DatasetReadError(
                f"Layer index {index} out of range - {self.path} has "
                f"{len(self._layer_names)} layer(s)",
                input_path=self.path
            )

        name = self._layer_names[index]
        try:
            frame = gpd.read_file(self.path, layer=name)
        except Exception as e:
            raise DatasetReadError(
                f"Error reading layer '{name}' from {self.path}: {e}",
                input_path=self.path
            ) from e

        logger.debug(
            f"Read layer '{name}': {len(frame)} features, "
            f"geometry type: {frame.geometry.geom_type.unique().tolist()}"
        )
        return GeoPandasLayer(name, frame)


# ============================================================================
# WRITE SIDE
# ============================================================================

class GeoPandasDataset(IVectorDataset):
    """
    Output dataset: a directory the driver writes layer files into.
    """

    def __init__(self, output_dir: str, driver: str):
        self._path = output_dir
        self.driver = driver
        self.extension = DRIVER_EXTENSIONS[driver]

    @property
    def path(self) -> str:
        return self._path

    def copy_layer(
        self,
        source_layer: IVectorLayer,
        name: str,
        options: Optional[Dict[str, Any]] = None
    ) -> List[str]:
        if not isinstance(source_layer, GeoPandasLayer):
            raise ContractViolationError(
                f"GeoPandasDataset can only copy GeoPandasLayer, got {type(source_layer).__name__}"
            )

        target = os.path.join(self._path, f"{name}.{self.extension}")
        write_kwargs: Dict[str, Any] = {}
        if options:
            write_kwargs["layer_options"] = dict(options)

        start = time.monotonic()
        try:
            source_layer.frame.to_file(target, driver=self.driver, layer=name, **write_kwargs)
        except Exception as e:
            raise DatasetWriteError(f"Error writing layer '{name}' to {target}: {e}") from e

        parts = sorted(glob.glob(os.path.join(glob.escape(self._path), f"{glob.escape(name)}.*")))
        logger.info(
            f"Wrote {source_layer.feature_count} features to {target} "
            f"({len(parts)} files, {int((time.monotonic() - start) * 1000)} ms)"
        )
        return parts


class GeoPandasVectorIO(IVectorReader, IVectorWriter):
    """
    Both capabilities backed by geopandas.

    Constructing one performs the one-time driver registration.

    Usage:
        vector_io = GeoPandasVectorIO(output_driver="ESRI Shapefile")
        with vector_io.open(kml_path) as source:
            layer = source.get_layer(0)
            dataset = vector_io.create_dataset(out_dir, "ESRI Shapefile")
            dataset.copy_layer(layer, "20-006")
    """

    def __init__(self, output_driver: str = "ESRI Shapefile"):
        register_drivers((output_driver,))

    def open(self, path: str, read_only: bool = True) -> GeoPandasDataSource:
        if not read_only:
            raise ContractViolationError("GeoPandasVectorIO opens sources read-only")
        if not os.path.isfile(path):
            raise DatasetReadError(f"Vector file not found: {path}", input_path=path)
        return GeoPandasDataSource(path)

    def create_dataset(self, output_dir: str, driver: str) -> GeoPandasDataset:
        if driver not in DRIVER_EXTENSIONS:
            raise DatasetWriteError(
                f"Unsupported output driver '{driver}'. Supported: {sorted(DRIVER_EXTENSIONS)}"
            )
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            raise DatasetWriteError(f"Cannot create dataset directory {output_dir}: {e}") from e
        return GeoPandasDataset(output_dir, driver)
