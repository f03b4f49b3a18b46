"""Tests for resource file content generation.

Covers:
- Derived names (class, table, migration class, instance, controller, route)
- PHP literal helpers
- Slot substitutions for a request
- Rendered model, migration, controller, routes and factory content
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from resource_generator.config import GeneratorConfig
from resource_generator.naming import EnglishNamer
from resource_generator.parser import AttributeSpec, parse_request
from resource_generator.scaffolder.generator import (
    ResourceGenerator,
    derive_names,
    php_attribute_array,
    php_list,
    php_string,
)
from resource_generator.scaffolder.templates import Slot

pytestmark = pytest.mark.unit

FIXTURES = Path(__file__).parent.parent / "fixtures"

TAGGED_ATTRIBUTES = (
    "name:string,100,fillable|age:integer,unsigned,index,hidden|colour:string,nullable,hidden|nickname"
)


@pytest.fixture
def generator() -> ResourceGenerator:
    return ResourceGenerator(GeneratorConfig())


# ---------------------------------------------------------------------------
# derive_names
# ---------------------------------------------------------------------------


class TestDeriveNames:
    def test_simple_name(self):
        names = derive_names("Monkey", EnglishNamer())
        assert names.class_name == "Monkey"
        assert names.table == "monkeys"
        assert names.migration_class == "CreateMonkeysTable"
        assert names.instance == "monkey"
        assert names.controller == "MonkeyController"
        assert names.route == "monkey"

    def test_lower_case_input_is_ucfirst(self):
        names = derive_names("animal", EnglishNamer())
        assert names.class_name == "Animal"
        assert names.table == "animals"

    def test_compound_name(self):
        names = derive_names("zooKeeper", EnglishNamer())
        assert names.class_name == "ZooKeeper"
        assert names.table == "zookeepers"
        assert names.migration_class == "CreateZooKeepersTable"
        assert names.instance == "zooKeeper"
        assert names.controller == "ZooKeeperController"
        assert names.route == "zookeeper"

    def test_irregular_plural(self):
        names = derive_names("Person", EnglishNamer())
        assert names.table == "people"
        assert names.migration_class == "CreatePeopleTable"


# ---------------------------------------------------------------------------
# PHP literals
# ---------------------------------------------------------------------------


class TestPhpLiterals:
    def test_php_string_escapes(self):
        assert php_string("it's") == "'it\\'s'"
        assert php_string("a\\b") == "'a\\\\b'"

    def test_php_list(self):
        assert php_list(["name", "age"]) == "['name', 'age']"

    def test_php_list_empty(self):
        assert php_list([]) == "[]"

    def test_attribute_array(self):
        request = parse_request("Animal", "name:string,100|nickname")
        assert php_attribute_array(request.attributes) == (
            "[['name' => 'name','properties' => ['string', '100']],"
            "['name' => 'nickname','properties' => []]]"
        )

    def test_attribute_array_empty(self):
        assert php_attribute_array([]) == "[]"


# ---------------------------------------------------------------------------
# Substitutions
# ---------------------------------------------------------------------------


class TestSubstitutions:
    def test_every_slot_has_a_value(self, generator):
        subs = generator.substitutions(parse_request("Tiger"))
        assert set(subs) == set(Slot)

    def test_values(self, generator):
        subs = generator.substitutions(parse_request("Badger", TAGGED_ATTRIBUTES))
        assert subs[Slot.CLASS] == "Badger"
        assert subs[Slot.TABLE] == "badgers"
        assert subs[Slot.MIGRATION] == "CreateBadgersTable"
        assert subs[Slot.FILLABLE] == "['name']"
        assert subs[Slot.HIDDEN] == "['age', 'colour']"
        assert subs[Slot.COLUMNS].splitlines()[0] == "            $table->string('name', 100);"

    def test_migration_filename(self, generator):
        request = parse_request("Chimp")
        filename = generator.migration_filename(request, datetime(2016, 3, 1, 9, 5, 7))
        assert filename == "2016_03_01_090507_create_chimps_table.php"

    def test_migration_glob(self, generator):
        assert generator.migration_glob(parse_request("Chimp")) == (
            "database/migrations/*_create_chimps_table.php"
        )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderModel:
    def test_class_and_namespace(self, generator):
        content = generator.render_model(parse_request("Animal"))
        assert content.startswith("<?php\n\nnamespace App;\n")
        assert "class Animal extends Model" in content
        assert "protected $table = 'animals';" in content

    def test_fillable_and_hidden(self, generator):
        content = generator.render_model(
            parse_request(
                "Animal",
                "name:string,100,fillable|age:integer,hidden|colour:string,hidden|nickname",
            )
        )
        assert "protected $fillable = ['name'];" in content
        assert "protected $hidden = ['age', 'colour'];" in content

    def test_migration_attributes(self, generator):
        content = generator.render_model(parse_request("Animal", "name:string,100|nickname"))
        assert (
            "return [['name' => 'name','properties' => ['string', '100']],"
            "['name' => 'nickname','properties' => []]];"
        ) in content

    def test_empty_lists_without_attributes(self, generator):
        content = generator.render_model(parse_request("Animal"))
        assert "protected $fillable = [];" in content
        assert "protected $hidden = [];" in content
        assert "return [];" in content

    def test_custom_namespace(self):
        generator = ResourceGenerator(GeneratorConfig(namespace="Acme\\Zoo"))
        content = generator.render_model(parse_request("Animal"))
        assert "namespace Acme\\Zoo;" in content


class TestRenderMigration:
    def test_matches_fixture(self, generator):
        expected = (FIXTURES / "2016_03_01_123045_create_badgers_table.php").read_text(
            encoding="utf-8"
        )
        assert generator.render_migration(parse_request("Badger", TAGGED_ATTRIBUTES)) == expected

    def test_table_statements(self, generator):
        content = generator.render_migration(parse_request("Monkey"))
        assert "class CreateMonkeysTable extends Migration" in content
        assert "Schema::create('monkeys', function (Blueprint $table) {" in content
        assert "Schema::drop('monkeys');" in content


class TestRenderController:
    def test_matches_fixture(self, generator):
        expected = (FIXTURES / "TigerController.php").read_text(encoding="utf-8")
        assert generator.render_controller(parse_request("Tiger")) == expected

    def test_compound_instance_name(self, generator):
        content = generator.render_controller(parse_request("ZooKeeper"))
        assert "class ZooKeeperController extends Controller" in content
        assert "public function show(ZooKeeper $zooKeeper)" in content
        assert "return redirect('zookeeper');" in content


class TestRenderRoutes:
    def test_matches_fixture(self, generator):
        expected = (FIXTURES / "snake_routes.php").read_text(encoding="utf-8")
        assert generator.render_routes(parse_request("Snake")) == expected

    def test_block_starts_on_new_line(self, generator):
        assert generator.render_routes(parse_request("Snake")).startswith("\n")


class TestRenderFactory:
    def test_definition(self, generator):
        content = generator.render_factory(parse_request("Elephant", "name:string,100|trunk:integer"))
        assert "$factory->define(App\\Elephant::class, function (Faker\\Generator $faker) {" in content
        assert "        'name' => $faker->name," in content
        assert "        'trunk' => $faker->randomNumber()," in content
        assert content.rstrip().endswith("});")

    def test_custom_renderer_and_namer(self, tmp_path: Path):
        (tmp_path / "model.php.j2").write_text("DummyClass/DummyTable\n", encoding="utf-8")

        class NoPluralNamer(EnglishNamer):
            def pluralize(self, word: str) -> str:
                return word

        generator = ResourceGenerator(
            GeneratorConfig(stubs_dir=tmp_path), namer=NoPluralNamer()
        )
        assert generator.render_model(parse_request("Tiger")) == "Tiger/tiger\n"


def test_attribute_spec_list_is_accepted(generator):
    request = parse_request("Animal")
    request = request.model_copy(update={"attributes": [AttributeSpec(name="age", properties=["integer"])]})
    assert "$table->integer('age');" in generator.render_migration(request)
