import unittest
from mold.errors import MissingFieldError
from mold.mapper import Mapper, hydrate, serialize
from tests.fixtures import TEAM, Member, Money, Team


class MapperTest(unittest.TestCase):

    members = TEAM['members']

    def test_hydrate_single(self):
        batman = Mapper(Member).to_entity(MapperTest.members[0])

        self.assertIsInstance(batman, Member)
        self.assertEqual('Batman', batman.name)
        self.assertEqual('Bruce Wayne', batman.real_name)

    def test_hydrate_multiple(self):
        members = Mapper(Member).to_entity(MapperTest.members)

        self.assertEqual(3, len(members))
        self.assertEqual(['Batman', 'Superman', 'The Flash'], [member.name for member in members])

    def test_hydrate_invalid_data(self):
        with self.assertRaises(TypeError):
            Mapper(Member).to_entity('Batman')

        with self.assertRaises(MissingFieldError):
            Mapper(Member).to_entity([MapperTest.members[0], {'name': 'Robin'}])

    def test_mapper_requires_entity(self):
        with self.assertRaises(ValueError):
            Mapper(Money)

        with self.assertRaises(ValueError):
            Mapper('NoSuchEntity')

    def test_from_entity(self):
        mapper = Mapper(Member)
        members = mapper.to_entity(MapperTest.members)

        self.assertEqual(MapperTest.members[0], mapper.from_entity(members[0]))
        self.assertEqual(MapperTest.members, mapper.from_entity(members))

        with self.assertRaises(ValueError):
            mapper.from_entity(Team(TEAM))

    def test_hydrate_and_serialize(self):
        team = hydrate(Team, TEAM)
        self.assertIsInstance(team, Team)
        self.assertEqual(TEAM, serialize(team))

    def test_hydrate_by_name(self):
        members = hydrate('tests.fixtures.Member', MapperTest.members)
        self.assertEqual(MapperTest.members, serialize(members))
