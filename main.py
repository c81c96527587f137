# main.py

# Load .env sebelum settings dibaca
from dotenv import load_dotenv
load_dotenv(override=True)

from sales_analytics import create_app

# Dipanggil oleh Uvicorn dengan factory=True
app = create_app
