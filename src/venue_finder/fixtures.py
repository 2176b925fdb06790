"""Sample venues around Times Square, NYC."""

from __future__ import annotations

from venue_finder.models import Venue

TIMES_SQUARE = (40.7580, -73.9855)

SAMPLE_VENUES: list[Venue] = [
    Venue(name="Coffee Shop A", latitude=40.7128, longitude=-74.0060, type="cafe"),
    Venue(name="Restaurant B", latitude=40.7589, longitude=-73.9851, type="restaurant"),
    Venue(name="Park C", latitude=40.7829, longitude=-73.9654, type="park"),
    Venue(name="Museum D", latitude=40.7614, longitude=-73.9776, type="museum"),
    Venue(name="Gym E", latitude=40.7489, longitude=-73.9680, type="gym"),
    Venue(name="Bar & Grill", latitude=40.7500, longitude=-73.9800, type="bar"),
    Venue(name="Pizza Palace", latitude=40.7550, longitude=-73.9750, type="restaurant"),
    Venue(name="Night Club X", latitude=40.7600, longitude=-73.9700, type="nightclub"),
    Venue(name="Sports Bar", latitude=40.7450, longitude=-73.9850, type="bar"),
    Venue(name="Fast Food Corner", latitude=40.7400, longitude=-73.9900, type="fast_food"),
]
