from datetime import datetime

from moodblog import database
from moodblog.mood import Polarity, Reaction


class Blog(database.Model):
    """
    Class that represents a blog.

    The following attributes of a blog are stored in this table:
        * name - display name of the blog
        * handle - short handle of the blog
        * positive - True if the blog has a positive mood, False for a negative mood
    """
    __tablename__ = 'blogs'

    id = database.Column(database.Integer, primary_key=True)
    name = database.Column(database.String, nullable=False)
    handle = database.Column(database.String, nullable=False)
    positive = database.Column(database.Boolean, nullable=False)
    entries = database.relationship('Entry', backref='blog', cascade='all, delete')

    def __init__(self, name: str, handle: str, positive: bool):
        """Create a new blog."""
        self.name = name
        self.handle = handle
        self.positive = positive

    def update(self, name: str, handle: str, positive: bool):
        """Replace every attribute of the blog."""
        self.name = name
        self.handle = handle
        self.positive = positive

    @property
    def polarity(self):
        return Polarity.POSITIVE if self.positive else Polarity.NEGATIVE

    def __repr__(self):
        return f'<Blog: {self.name} ({self.polarity.value})>'


class Entry(database.Model):
    """
    Class that represents an entry posted to a blog.

    The following attributes of an entry are stored in this table:
        * title - title of the entry
        * content - text of the entry
        * date - date and time (in UTC) of the entry
        * reaction - reaction tag (LIKE, HAHA, SAD, ANGRY)
        * blog_id - ID of the blog that owns this entry
    """
    __tablename__ = 'entries'

    id = database.Column(database.Integer, primary_key=True)
    title = database.Column(database.String, nullable=False)
    content = database.Column(database.Text, nullable=False)
    date = database.Column(database.DateTime, nullable=False)
    reaction = database.Column(database.Enum(Reaction), nullable=False)
    blog_id = database.Column(database.Integer, database.ForeignKey('blogs.id'), nullable=False)

    def __init__(self, title: str, content: str, reaction: Reaction, blog_id: int, date: datetime = None):
        """Create a new entry."""
        self.title = title
        self.content = content
        self.reaction = reaction
        self.blog_id = blog_id
        self.date = date or datetime.utcnow()

    def update(self, title: str, content: str, reaction: Reaction, blog_id: int, date: datetime = None):
        """Replace every attribute of the entry."""
        self.title = title
        self.content = content
        self.reaction = reaction
        self.blog_id = blog_id
        self.date = date or datetime.utcnow()

    def __repr__(self):
        return f'<Entry: {self.title}>'
