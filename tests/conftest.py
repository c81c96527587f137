import pytest
from datetime import date, datetime
from decimal import Decimal

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from sales_analytics import create_app
from sales_analytics.database import get_db_session
from sales_analytics.models import (
    Base, Category, Product, Employee, Customer, Sale, SaleItem,
    DISCOUNT_FIXED, DISCOUNT_PERCENT,
)
from sales_analytics.security import create_access_token


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def sample_data(session_factory):
    """
    Dataset kecil dengan angka yang mudah dihitung manual.

    s1 2024-01-05 23:59:59  1000 gross, 10% custom, card, Alice, c1
    s2 2024-01-06 00:00:00   500 gross, 50 product discount, cash, Bob, c2
    s3 2024-01-04 12:00:00   300 gross, 10 fixed custom, cash, Alice (other), c1
    s4 2024-01-10 09:00:00   200 gross, cash, no employee, no customer
    """
    async with session_factory() as session:
        drinks = Category(name="Drinks")
        snacks = Category(name="Snacks")

        water = Product(name="Water", code="MW", batch_no="B1", total_quantity=100, stock_quantity=60,
                        purchase_date=date(2023, 12, 1), expire_date=date(2024, 12, 1),
                        category=drinks, created_at=datetime(2024, 1, 1, 8, 0))
        water_b2 = Product(name="Water", code="MW", batch_no="B2", total_quantity=50, stock_quantity=50,
                           purchase_date=date(2024, 1, 2), expire_date=date(2025, 1, 2),
                           category=drinks, created_at=datetime(2024, 1, 3, 8, 0))
        chips = Product(name="Chips", code="PC", batch_no="C1", total_quantity=40, stock_quantity=37,
                        category=snacks, created_at=datetime(2024, 1, 2, 8, 0))
        gift_bag = Product(name="Gift Bag", code="GB", batch_no="G1", total_quantity=10, stock_quantity=9,
                           created_at=datetime(2024, 1, 4, 8, 0))
        unsold = Product(name="Nuts", code="UN", batch_no="N1", total_quantity=20, stock_quantity=20,
                         category=snacks, created_at=datetime(2024, 1, 5, 8, 0))

        alice = Employee(name="Alice")
        bob = Employee(name="Bob")
        other_alice = Employee(name="Alice")
        c1 = Customer(name="Customer One")
        c2 = Customer(name="Customer Two")

        s1 = Sale(
            created_at=datetime(2024, 1, 5, 23, 59, 59),
            total_amount=Decimal("1000.00"), total_cost=Decimal("600.00"), discount=Decimal("0"),
            custom_discount=Decimal("10"), custom_discount_type=DISCOUNT_PERCENT,
            payment_method="card", employee=alice, customer=c1,
            items=[
                SaleItem(product=water, quantity=2, total_price=Decimal("400.00")),
                SaleItem(product=chips, quantity=3, total_price=Decimal("600.00")),
            ],
        )
        s2 = Sale(
            created_at=datetime(2024, 1, 6, 0, 0, 0),
            total_amount=Decimal("500.00"), total_cost=Decimal("200.00"), discount=Decimal("50.00"),
            custom_discount=Decimal("0"), custom_discount_type=DISCOUNT_FIXED,
            payment_method="cash", employee=bob, customer=c2,
            items=[SaleItem(product=gift_bag, quantity=1, total_price=Decimal("500.00"))],
        )
        s3 = Sale(
            created_at=datetime(2024, 1, 4, 12, 0, 0),
            total_amount=Decimal("300.00"), total_cost=Decimal("100.00"), discount=Decimal("0"),
            custom_discount=Decimal("10.00"),
            payment_method="cash", employee=other_alice, customer=c1,
            items=[SaleItem(product=water_b2, quantity=1, total_price=Decimal("300.00"))],
        )
        s4 = Sale(
            created_at=datetime(2024, 1, 10, 9, 0, 0),
            total_amount=Decimal("200.00"), total_cost=Decimal("50.00"), discount=Decimal("0"),
            payment_method="cash",
            items=[SaleItem(product=water, quantity=5, total_price=Decimal("200.00"))],
        )

        session.add_all([drinks, snacks, water, water_b2, chips, gift_bag, unsold,
                         alice, bob, other_alice, c1, c2, s1, s2, s3, s4])
        await session.commit()

        return {
            'water': water.id, 'water_b2': water_b2.id, 'chips': chips.id,
            'gift_bag': gift_bag.id, 'unsold': unsold.id,
            's1': s1.id, 's2': s2.id, 's3': s3.id, 's4': s4.id,
        }


@pytest.fixture
def app(session_factory):
    app = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", ["Admin"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def cashier_headers():
    token = create_access_token("cashier", ["Cashier"])
    return {"Authorization": f"Bearer {token}"}
