# ============================================================================
# INTERFACE - VECTOR I/O CAPABILITIES
# ============================================================================
# PURPOSE: Abstract capabilities the conversion controller consumes from a
#          geospatial I/O library (open a vector source, create a dataset)
# EXPORTS: IVectorLayer, IVectorDataSource, IVectorReader, IVectorDataset,
#          IVectorWriter
# DEPENDENCIES: abc, typing
# PATTERNS: Interface segregation, dependency inversion
# ENTRY_POINTS: Implemented by infrastructure.vector_io.GeoPandasVectorIO
# ============================================================================

"""
Vector I/O Interfaces

Defines the two capabilities the converter needs from a geospatial library:

    open vector archive:    path + read-only flag -> data source with
                            an ordered list of layers
    create vector dataset:  output directory + driver -> dataset that can
                            copy a source layer under a new name

The controller only talks to these interfaces so tests can substitute
in-memory fakes and the library can be swapped without touching the run
logic.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class IVectorLayer(ABC):
    """
    One layer: geometries plus their attribute table.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Layer name as reported by the source."""
        pass

    @property
    @abstractmethod
    def feature_count(self) -> int:
        """Number of features in the layer."""
        pass


class IVectorDataSource(ABC):
    """
    An opened vector source exposing an ordered list of layers.

    Supports use as a context manager; close() releases library handles.
    """

    @property
    @abstractmethod
    def layer_count(self) -> int:
        """Number of layers in the source."""
        pass

    @abstractmethod
    def get_layer(self, index: int) -> IVectorLayer:
        """
        Return the layer at position index.

        Raises:
            DatasetReadError: If index is out of range or the layer is unreadable
        """
        pass

    def close(self) -> None:
        """Release any handles held by the source."""
        pass

    def __enter__(self) -> 'IVectorDataSource':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class IVectorReader(ABC):
    """
    Capability: open a vector file.
    """

    @abstractmethod
    def open(self, path: str, read_only: bool = True) -> IVectorDataSource:
        """
        Open a vector file.

        Args:
            path: File to open
            read_only: Open without write access

        Returns:
            Opened data source

        Raises:
            DatasetReadError: If the file cannot be opened
        """
        pass


class IVectorDataset(ABC):
    """
    A newly created output dataset container.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Directory holding the dataset's files."""
        pass

    @abstractmethod
    def copy_layer(
        self,
        source_layer: IVectorLayer,
        name: str,
        options: Optional[Dict[str, Any]] = None
    ) -> List[str]:
        """
        Copy a layer into this dataset under a new name.

        Args:
            source_layer: Layer to copy
            name: Target layer name
            options: Driver layer creation flags

        Returns:
            Paths of the files written for the layer

        Raises:
            DatasetWriteError: If the layer cannot be written
        """
        pass


class IVectorWriter(ABC):
    """
    Capability: create a vector dataset.
    """

    @abstractmethod
    def create_dataset(self, output_dir: str, driver: str) -> IVectorDataset:
        """
        Create an empty dataset container.

        Args:
            output_dir: Directory for the dataset files
            driver: OGR driver name, e.g. "ESRI Shapefile"

        Raises:
            DatasetWriteError: If the dataset cannot be created
        """
        pass
