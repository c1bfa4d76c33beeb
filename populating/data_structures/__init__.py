from .collection import PopulatingCollection
from .sequence import PopulatingList
from .sets import PopulatingSet
from .mapping import PopulatingMapping
from .views import SubSequenceView
from .defaults import with_default
