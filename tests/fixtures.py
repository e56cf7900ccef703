from datetime import datetime
from typing import Optional
from mold.entity import Entity
from mold.field import Field
from mold.types import register_builder


class Address(Entity):
    address_line1 = Field(name='addressLine1', required=True)
    address_line2 = Field(name='addressLine2', nullable=True)
    address_line3 = Field(name='addressLine3', nullable=True)
    zip = Field(required=True)
    city = Field(required=True)
    state = Field(nullable=True)
    country = Field(required=True)


class Member(Entity):
    name = Field(required=True)
    real_name = Field(name='realName', required=True, nullable=True)
    powers = Field(is_array=True, required=True)


class Team(Entity):
    id = Field(name='id', type='int', required=True)
    active = Field(type='bool', required=True)
    name = Field(required=True)
    address = Field(type='tests.fixtures.Address', required=True)
    created_at = Field(name='createdAt', type='DateTime', required=True)
    members = Field(type=Member, is_array=True, required=True)


class Hero(Entity):
    alias: str = Field(required=True)
    age: int = Field()
    rating: Optional[float] = Field(nullable=True)
    tags: list[str] = Field(is_array=True)
    meta: dict = Field()
    sidekick: 'Member' = Field(nullable=True)
    born_at: datetime = Field(name='bornAt')


class SuperHero(Hero):
    powers = Field(is_array=True, required=True)


class Mentor(Entity):
    name = Field(required=True)
    protege: 'Apprentice' = Field(nullable=True)
    students = Field(type='Member', is_array=True)


class Apprentice(Entity):
    name = Field(required=True)


class Event(Entity):
    title = Field(required=True)
    day = Field(type='date')
    starts_at = Field(name='startsAt', type=datetime, nullable=True)
    payload = Field(type='object')
    history = Field(type='array', default=[])
    scores = Field(type='float', is_array=True, nullable=True)
    price = Field(type='money')


class Headquarters(Entity):
    name = Field(required=True)
    owner = Field(type='NoSuchEntity', required=True)
    location = Field(type='no.such.Location')


class Money:
    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency


def build_money(value):
    amount, currency = value.split(' ')
    return Money(float(amount), currency)


register_builder(Money, build_money, 'money')


TEAM = {
    'id': 12,
    'active': True,
    'name': 'Justice League',
    'address': {
        'addressLine1': '1007 Mountain Drive',
        'addressLine2': 'Wayne Manor',
        'zip': '12345',
        'city': 'Gotham City',
        'state': 'NJ',
        'country': 'USA'
    },
    'createdAt': '1960-03-01T20:12:23-04:00',
    'members': [
        {
            'name': 'Batman',
            'realName': 'Bruce Wayne',
            'powers': []
        },
        {
            'name': 'Superman',
            'realName': 'Clark Kent',
            'powers': [
                'invulnerability',
                'flight',
                'laser eyes'
            ]
        },
        {
            'name': 'The Flash',
            'realName': None,
            'powers': [
                'super speed'
            ]
        }
    ]
}
