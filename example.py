import logging
from datetime import datetime
from mold.entity import Entity
from mold.errors import ValidationError
from mold.field import Field
from mold.mapper import Mapper

logging.basicConfig(level=logging.DEBUG)


class Member(Entity):
    name = Field(required=True)
    real_name = Field(name='realName', required=True, nullable=True)
    powers = Field(is_array=True, required=True)


class Team(Entity):
    name = Field(required=True)
    created_at = Field(name='createdAt', type=datetime, required=True)
    members = Field(type=Member, is_array=True, required=True)


team = Mapper(Team).to_entity({
    'name': 'Justice League',
    'createdAt': '1960-03-01T20:12:23-04:00',
    'members': [
        {'name': 'Superman', 'realName': 'Clark Kent', 'powers': ['flight']},
        {'name': 'The Flash', 'realName': None, 'powers': ['super speed']}
    ]
})
print(team.to_json(indent=4))

try:
    Member({'name': 'Batman', 'powers': []})
except ValidationError as e:
    print(e)
