# ui/components/base_table_model.py

from PyQt5.QtCore import QAbstractTableModel, Qt, QModelIndex


class BaseTableModel(QAbstractTableModel):
    """
    Base reusable table model with:
    - items storage
    - column configuration as (attribute, header) pairs
    """

    def __init__(self, items=None, columns=None):
        super().__init__()
        self._items = items or []
        self._columns = columns or []

    def rowCount(self, parent=QModelIndex()):
        return len(self._items)

    def columnCount(self, parent=QModelIndex()):
        return len(self._columns)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None

        if orientation == Qt.Horizontal:
            _, header = self._columns[section]
            return header

        return section + 1

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        if role != Qt.DisplayRole:
            return None

        item = self._items[index.row()]
        key, _ = self._columns[index.column()]
        value = getattr(item, key, "")
        return "" if value is None else str(value)

    def set_items(self, items):
        self.beginResetModel()
        self._items = list(items)
        self.endResetModel()

    def get_item(self, row: int):
        """Return the underlying item at `row` or None if out of range."""
        if row is None:
            return None
        if 0 <= int(row) < len(self._items):
            return self._items[int(row)]
        return None


CUSTOMER_COLUMNS = [
    ("full_name", "Name"),
    ("phone_number", "Phone"),
    ("email", "Email"),
    ("address_count", "Addresses"),
    ("created_display", "Created"),
]

ADDRESS_COLUMNS = [
    ("address_details", "Address"),
    ("city", "City"),
    ("state", "State"),
    ("pin_code", "PIN Code"),
    ("primary_display", "Primary"),
]

ADDRESS_SEARCH_COLUMNS = [
    ("customer_name", "Customer"),
    ("phone_number", "Phone"),
    ("address_details", "Address"),
    ("city", "City"),
    ("state", "State"),
    ("pin_code", "PIN Code"),
]
