from sqlalchemy import Column, Integer, String, Float
from app.core.database import Base


class Property(Base):
    """A real estate listing"""
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    address = Column(String(255), nullable=False, index=True)
    price = Column(Float, nullable=False)
    bedrooms = Column(Integer, nullable=False)
    bathrooms = Column(Integer, nullable=False)
    type = Column(String(50), nullable=True)

    def __repr__(self):
        return f"<Property id={self.id} address={self.address!r}>"
