from slugline.models.venue import Venue
from slugline.models.hall import Hall
from slugline.models.title import Title, CategoryType
