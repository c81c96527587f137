# manage.py

# Load .env sebelum settings dibaca
from dotenv import load_dotenv
load_dotenv()

import asyncio
import json
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import List, Optional

import typer
import uvicorn
from typing_extensions import Annotated

# CLI untuk manajemen aplikasi, pengganti manage.py ala Flask.
cli = typer.Typer(
    help="Manajemen CLI untuk Sales Analytics API."
)

# --- Database Commands ---

@cli.command()
def init_db():
    """
    Inisialisasi database dan membuat semua tabel.
    """
    from sales_analytics.database import Base, async_engine
    from sales_analytics import models  # noqa: F401  (register semua tabel)

    async def create_tables():
        async with async_engine.begin() as conn:
            typer.echo("Membuat semua tabel sesuai models...")
            await conn.run_sync(Base.metadata.create_all)
        typer.secho("Database berhasil diinisialisasi.", fg=typer.colors.GREEN)

    asyncio.run(create_tables())


@cli.command()
def seed_demo(
    days: Annotated[int, typer.Option(help="Sebar transaksi demo ke N hari terakhir.")] = 7
):
    """
    Isi database dengan data demo (category, product, employee, customer, sales).
    """
    from sales_analytics.database import AsyncSessionLocal
    from sales_analytics.models import (
        Category, Product, Employee, Customer, Sale, SaleItem,
        DISCOUNT_FIXED, DISCOUNT_PERCENT,
    )

    async def seed():
        async with AsyncSessionLocal() as session:
            drinks = Category(name="Drinks")
            snacks = Category(name="Snacks")
            today = date.today()
            products = [
                Product(name="Mineral Water", code="MW-500", batch_no="B001", total_quantity=200,
                        stock_quantity=150, purchase_date=today - timedelta(days=30),
                        expire_date=today + timedelta(days=300), category=drinks),
                Product(name="Mineral Water", code="MW-500", batch_no="B002", total_quantity=100,
                        stock_quantity=100, purchase_date=today - timedelta(days=5),
                        expire_date=today + timedelta(days=360), category=drinks),
                Product(name="Potato Chips", code="PC-100", batch_no="C001", total_quantity=80,
                        stock_quantity=60, purchase_date=today - timedelta(days=20),
                        expire_date=today + timedelta(days=90), category=snacks),
                Product(name="Gift Bag", code="GB-1", batch_no="G001", total_quantity=50,
                        stock_quantity=45, purchase_date=today - timedelta(days=10)),
            ]
            cashier = Employee(name="Cashier One")
            customer = Customer(name="Walk-in Regular", phone="0800000000")
            session.add_all([drinks, snacks, cashier, customer, *products])

            for offset in range(days):
                created = datetime.combine(today - timedelta(days=offset), datetime.min.time()) + timedelta(hours=10)
                sale = Sale(
                    created_at=created,
                    total_amount=Decimal("1000.00"), total_cost=Decimal("600.00"),
                    discount=Decimal("50.00"),
                    custom_discount=Decimal("10.00"),
                    custom_discount_type=DISCOUNT_PERCENT if offset % 2 else DISCOUNT_FIXED,
                    payment_method="cash" if offset % 3 else "card",
                    employee=cashier,
                    customer=customer if offset % 2 == 0 else None,
                    items=[
                        SaleItem(product=products[0], quantity=4, total_price=Decimal("400.00")),
                        SaleItem(product=products[2], quantity=3, total_price=Decimal("450.00")),
                        SaleItem(product=products[3], quantity=1, total_price=Decimal("150.00")),
                    ],
                )
                session.add(sale)

            await session.commit()
        typer.secho(f"Data demo untuk {days} hari berhasil dibuat.", fg=typer.colors.GREEN)

    asyncio.run(seed())


# --- Auth Commands ---

@cli.command()
def issue_token(
    subject: Annotated[str, typer.Argument(help="Username / subject di dalam token.")],
    role: Annotated[Optional[List[str]], typer.Option("--role", help="Role, bisa diulang.")] = None,
    minutes: Annotated[Optional[int], typer.Option(help="Masa berlaku token dalam menit.")] = None,
):
    """
    Buat bearer token untuk testing endpoint yang dilindungi role.
    """
    from sales_analytics.config import settings
    from sales_analytics.security import create_access_token

    roles = role or [settings.ADMIN_ROLE]
    typer.echo(create_access_token(subject, roles, expires_minutes=minutes))


# --- Report Commands ---

@cli.command()
def report(
    start_date: Annotated[Optional[str], typer.Option(help="YYYY-MM-DD")] = None,
    end_date: Annotated[Optional[str], typer.Option(help="YYYY-MM-DD")] = None,
):
    """
    Cetak sales report (JSON) langsung dari database.
    """
    from sales_analytics.database import AsyncSessionLocal
    from sales_analytics.services import create_service_registry
    from sales_analytics.services.exceptions import InvalidDateError

    async def build():
        async with AsyncSessionLocal() as session:
            registry = create_service_registry(session, config={}, current_user="cli")
            result = await registry.sales_report_service.generate_sales_report(start_date, end_date)
            return result.model_dump(mode='json')

    try:
        payload = asyncio.run(build())
    except InvalidDateError as e:
        typer.secho(f"Gagal: {e.message}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(payload, indent=2))


@cli.command()
def lookup(
    code: Annotated[str, typer.Argument(help="Product code yang dicari.")]
):
    """
    Cetak semua batch untuk satu product code.
    """
    from sales_analytics.database import AsyncSessionLocal
    from sales_analytics.services import create_service_registry

    async def find():
        async with AsyncSessionLocal() as session:
            registry = create_service_registry(session, config={}, current_user="cli")
            result = await registry.product_service.lookup_by_code(code)
            return result.model_dump(mode='json')

    typer.echo(json.dumps(asyncio.run(find()), indent=2))


# --- Server Commands ---

@cli.command()
def run(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = True
):
    """
    Menjalankan development server Uvicorn.
    """
    typer.echo(f"Menjalankan server di http://{host}:{port}")
    uvicorn.run("main:app", host=host, port=port, reload=reload, factory=True)


if __name__ == "__main__":
    cli()
