"""Weather feel service: OpenWeather current conditions, simplified."""

__version__ = "0.1.0"
