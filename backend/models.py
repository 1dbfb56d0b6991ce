from sqlalchemy import Column, String, Integer, BigInteger, Boolean, DateTime, Numeric, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base
from domain.aggregates.menu import Menu, MenuLine
from domain.aggregates.table_group import TableGroup
from domain.entities.menu_group import MenuGroup
from domain.entities.order import Order, OrderLineItem
from domain.entities.order_table import OrderTable
from domain.entities.product import Product
from domain.value_objects.order_status import OrderStatus
from domain.value_objects.price import Price


class ProductModel(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name='ck_products_price'),
    )

    def to_entity(self) -> Product:
        return Product(id=self.id, name=self.name, price=Price.of(self.price))


class MenuGroupModel(Base):
    __tablename__ = 'menu_groups'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    menus = relationship("MenuModel", back_populates="menu_group")

    def to_entity(self) -> MenuGroup:
        return MenuGroup(id=self.id, name=self.name)


class MenuModel(Base):
    __tablename__ = 'menus'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)
    menu_group_id = Column(Integer, ForeignKey('menu_groups.id'), nullable=False)

    menu_group = relationship("MenuGroupModel", back_populates="menus")
    # Lines live and die with their menu
    lines = relationship(
        "MenuLineModel",
        back_populates="menu",
        cascade="all, delete-orphan",
        order_by="MenuLineModel.seq"
    )

    def to_entity(self) -> Menu:
        return Menu(
            id=self.id,
            name=self.name,
            price=Price.of(self.price),
            menu_group=self.menu_group.to_entity(),
            lines=tuple(line.to_entity() for line in self.lines)
        )


class MenuLineModel(Base):
    """Persisted (product, quantity) entry of a menu."""
    __tablename__ = 'menu_lines'

    seq = Column(Integer, primary_key=True, autoincrement=True)
    menu_id = Column(Integer, ForeignKey('menus.id'), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    quantity = Column(BigInteger, nullable=False)

    menu = relationship("MenuModel", back_populates="lines")
    product = relationship("ProductModel")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name='ck_menu_lines_quantity'),
        Index('idx_menu_lines_menu', 'menu_id'),
    )

    def to_entity(self) -> MenuLine:
        return MenuLine(
            id=self.seq,
            product=self.product.to_entity(),
            quantity=self.quantity,
            menu_id=self.menu_id
        )


class TableGroupModel(Base):
    __tablename__ = 'table_groups'

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, nullable=False)

    order_tables = relationship(
        "OrderTableModel",
        back_populates="table_group",
        order_by="OrderTableModel.id"
    )

    def to_entity(self) -> TableGroup:
        return TableGroup(
            id=self.id,
            created_at=self.created_at,
            table_ids=tuple(table.id for table in self.order_tables)
        )


class OrderTableModel(Base):
    """
    A physical dining table.

    table_group_id is NULL while the table is ungrouped.
    """
    __tablename__ = 'order_tables'

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_group_id = Column(Integer, ForeignKey('table_groups.id'), nullable=True)
    number_of_guests = Column(Integer, nullable=False, default=0)
    empty = Column(Boolean, nullable=False, default=True)

    table_group = relationship("TableGroupModel", back_populates="order_tables")
    orders = relationship("OrderModel", back_populates="order_table")

    __table_args__ = (
        CheckConstraint("number_of_guests >= 0", name='ck_order_tables_guests'),
        Index('idx_order_tables_group', 'table_group_id'),
    )

    def to_entity(self) -> OrderTable:
        return OrderTable(
            id=self.id,
            number_of_guests=self.number_of_guests,
            empty=self.empty,
            table_group_id=self.table_group_id
        )

    def apply(self, table: OrderTable) -> None:
        """Copy the mutable state of a domain snapshot onto this row."""
        self.number_of_guests = table.number_of_guests
        self.empty = table.empty
        self.table_group_id = table.table_group_id


class OrderModel(Base):
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_table_id = Column(Integer, ForeignKey('order_tables.id'), nullable=False)
    order_status = Column(String, nullable=False, default=OrderStatus.COOKING.value)
    ordered_time = Column(DateTime, nullable=False)

    order_table = relationship("OrderTableModel", back_populates="orders")
    line_items = relationship(
        "OrderLineItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineItemModel.seq"
    )

    __table_args__ = (
        CheckConstraint(
            "order_status IN ('COOKING', 'MEAL', 'COMPLETION')",
            name='ck_orders_status'
        ),
        Index('idx_orders_table', 'order_table_id'),
    )

    def to_entity(self) -> Order:
        return Order(
            id=self.id,
            order_table_id=self.order_table_id,
            status=OrderStatus(self.order_status),
            ordered_time=self.ordered_time,
            line_items=tuple(item.to_entity() for item in self.line_items)
        )


class OrderLineItemModel(Base):
    __tablename__ = 'order_line_items'

    seq = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey('orders.id'), nullable=False)
    menu_id = Column(Integer, ForeignKey('menus.id'), nullable=False)
    quantity = Column(BigInteger, nullable=False)

    order = relationship("OrderModel", back_populates="line_items")

    def to_entity(self) -> OrderLineItem:
        return OrderLineItem(id=self.seq, menu_id=self.menu_id, quantity=self.quantity)
