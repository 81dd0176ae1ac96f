# tests/conftest.py
from typing import List

import pytest
from bs4 import BeautifulSoup


AMAZON_URL = "https://www.amazon.in/Wireless-Mouse/dp/B0TEST1234"
FLIPKART_URL = "https://www.flipkart.com/boat-rockerz-450/p/itm123"


AMAZON_HTML = """
<html>
<head><title>Amazon.in: Wireless Mouse</title></head>
<body>
  <div id="nav-main"><h1>Amazon.in</h1></div>
  <div id="wayfinding-breadcrumbs_feature_div">
    <ul>
      <li><a href="/electronics">Electronics</a></li>
      <li class="a-breadcrumb-divider">&rsaquo;</li>
      <li><a href="/computers">Computers &amp; Accessories</a></li>
    </ul>
  </div>
  <span id="productTitle">
      Wireless
      Mouse
  </span>
  <div id="imgTagWrapperId">
    <img id="landingImage" src="https://m.media-amazon.com/images/I/mouse-main.jpg" />
  </div>
  <div id="corePrice_feature_div">
    <span class="a-price a-text-price" data-a-strike="true">
      <span class="a-offscreen">₹2,000</span>
    </span>
    <span class="a-price priceToPay">
      <span class="a-offscreen">₹1,200</span>
      <span class="a-price-whole">1,200</span>
    </span>
  </div>
  <div id="feature-bullets">
    <ul>
      <li><span class="a-list-item">
        Silent clicks and an
        ergonomic shape for all-day use
      </span></li>
      <li><span class="a-list-item">18 month battery life</span></li>
    </ul>
  </div>
</body>
</html>
"""

FLIPKART_HTML = """
<html>
<body>
  <div class="_1HEvpc">Home Audio Headphones</div>
  <h1 class="_6EBuvT">
    <span class="VU-ZEz">boAt Rockerz 450 Bluetooth On Ear Headphones</span>
  </h1>
  <div class="hl05eU">
    <div class="Nx9bqj CxhGGd">₹1,499</div>
    <div class="yRaY8j ZYYwLA">₹3,990</div>
    <div class="UkUFwK WW8yVX"><span>62% off</span></div>
  </div>
  <div class="_1mXcCf">Wireless headphones with 40 hours of playback and deep bass.</div>
  <div class="_3BTv9X">
    <img class="DByuf4 IZexXJ" src="https://rukminim2.flixcart.com/image/416/416/rockerz-450.jpeg" />
  </div>
</body>
</html>
"""

MINIMAL_HTML = """
<html><body>
  <div class="a-price"><span class="a-offscreen">₹499</span></div>
</body></html>
"""


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


class FakeFetchClient:
    """Returns canned HTML and records every URL it was asked for."""

    def __init__(self, html: str = ""):
        self.html = html
        self.calls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        return self.html


@pytest.fixture
def amazon_soup() -> BeautifulSoup:
    return make_soup(AMAZON_HTML)


@pytest.fixture
def flipkart_soup() -> BeautifulSoup:
    return make_soup(FLIPKART_HTML)
