# ==============================================================================
# REPOSITORIO BASE - Almacenamiento en memoria
# ==============================================================================
# Todos los datos viven en memoria durante la sesión de la aplicación.
# Se cargan desde los datos semilla al crear el repositorio y se descartan
# al reiniciar.
# ==============================================================================

import copy
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional


class BaseRepository(ABC):
    """
    Clase base abstracta para todos los repositorios.
    Mantiene los datos en memoria y serializa cada lectura/escritura
    con un lock (el servidor de desarrollo de Flask atiende en hilos).
    """

    def __init__(self, seed: Optional[Callable[[], Any]] = None):
        """
        Inicializa el repositorio.

        Args:
            seed: Función que retorna los datos iniciales (opcional)
        """
        self._lock = threading.RLock()
        self._seed = seed
        self._data = self._initial_data()

    def _initial_data(self) -> Any:
        if self._seed is None:
            return self._empty_data()
        return copy.deepcopy(self._seed())

    @abstractmethod
    def _empty_data(self) -> Any:
        """
        Retorna la estructura de datos vacía para este repositorio.

        Returns:
            Estructura vacía (dict, list, etc.) según el repositorio
        """
        pass

    def _read_raw(self) -> Any:
        """Retorna los datos actuales (referencia viva, no copia)."""
        with self._lock:
            return self._data

    def _write_raw(self, data: Any) -> None:
        """Reemplaza los datos actuales."""
        with self._lock:
            self._data = data

    def reload(self) -> None:
        """Vuelve a los datos semilla (equivale a recargar la página)."""
        with self._lock:
            self._data = self._initial_data()


class ListRepository(BaseRepository):
    """
    Repositorio base para registros ordenados almacenados como lista.
    Cada registro es un diccionario con clave 'id'.

    Ejemplo: catálogo -> [{'id': '1', ...}, {'id': '2', ...}]
    """

    id_field = 'id'

    def __init__(self, seed: Optional[Callable[[], Any]] = None):
        self._last_issued_id = 0
        super().__init__(seed)

    def _empty_data(self) -> List:
        return []

    def reload(self) -> None:
        with self._lock:
            super().reload()
            self._last_issued_id = 0

    def get_all(self) -> List[Dict[str, Any]]:
        """
        Obtiene todos los registros en su orden de inserción.

        Returns:
            Lista con todos los datos
        """
        return self._read_raw()

    def save_all(self, data: List[Dict[str, Any]]) -> None:
        """Reemplaza la lista completa."""
        self._write_raw(list(data))

    def append(self, record: Dict[str, Any]) -> None:
        """Agrega un registro al final."""
        with self._lock:
            self._data.append(record)

    def get_by_id(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """
        Obtiene un registro por su ID.
        Compara como string para aceptar tanto 1 como "1".
        """
        return self.find_by(self.id_field, str(record_id))

    def find_by(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """
        Busca un registro por un campo específico.

        Returns:
            Primer registro que coincide o None
        """
        with self._lock:
            for record in self._data:
                if record.get(field) == value:
                    return record
        return None

    def update(self, record_id: Any, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Actualiza campos de un registro en el lugar (conserva su posición).

        Returns:
            Registro actualizado o None si no existe
        """
        with self._lock:
            record = self.get_by_id(record_id)
            if record is None:
                return None
            record.update(updates)
            return record

    def delete(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """
        Elimina un registro.

        Returns:
            Registro eliminado o None si no existía
        """
        with self._lock:
            for index, record in enumerate(self._data):
                if record.get(self.id_field) == str(record_id):
                    return self._data.pop(index)
        return None

    def get_next_id(self) -> str:
        """
        Siguiente ID numérico como string. Nunca retrocede: un ID entregado
        no se vuelve a entregar aunque su registro se haya eliminado.
        Los IDs no numéricos se ignoran.
        """
        with self._lock:
            max_id = self._last_issued_id
            for record in self._data:
                try:
                    max_id = max(max_id, int(record.get(self.id_field)))
                except (TypeError, ValueError):
                    continue
            self._last_issued_id = max_id + 1
            return str(self._last_issued_id)

    def count(self) -> int:
        with self._lock:
            return len(self._data)
