import random
import string
from decimal import Decimal
from urllib.parse import quote
from flask import current_app
from slugify import slugify as python_slugify


def slugify(text: str, max_length: int = 0) -> str:
    """Generate URL-friendly slug"""
    return python_slugify(text or "", max_length=max_length)


def random_suffix(length: int = 6) -> str:
    """Generate a short lowercase alphanumeric token"""
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=length))


def format_price(price) -> str:
    """Format price as naira with thousands separators"""
    value = Decimal(str(price))
    if value == value.to_integral_value():
        return f'₦{int(value):,}'
    return f'₦{value:,.2f}'


def get_share_url(slug: str) -> str:
    """Public URL of an item page"""
    base_url = current_app.config['WEB_URL'].rstrip('/')
    return f'{base_url}/item/{slug}'


def build_inquiry_url(name: str, price, slug: str) -> str:
    """WhatsApp link pre-filled with an inquiry about one item"""
    message = (
        f'Hi, I found interest in this item: {name} - ({format_price(price)}) '
        f'\n\n{get_share_url(slug)}'
    )
    number = current_app.config['WHATSAPP_NUMBER']
    return f'https://wa.me/{number}?text={quote(message, safe="")}'
