import json
from datetime import date

import pytest

from sql_table_parser.codegen import (
    EntityGenerator,
    FileEmitter,
    TypeMapper,
    export_schema_json,
    simplify_schema,
    to_camel_case,
    to_pascal_case,
)
from sql_table_parser.errors import ConfigError, EmissionError
from sql_table_parser.extractors import ColumnType, parse_create_tables


def _type(name):
    return ColumnType(name=name, length=None, original_type=name)


class TestTypeMapper:
    @pytest.mark.parametrize("sql_type, java_type", [
        ("BIGINT", "Long"),
        ("INT", "Integer"),
        ("TINYINT", "Integer"),
        ("VARCHAR", "String"),
        ("LONGTEXT", "String"),
        ("DECIMAL", "BigDecimal"),
        ("DOUBLE", "Double"),
        ("FLOAT", "Float"),
        ("DATETIME", "LocalDateTime"),
        ("TIMESTAMP", "LocalDateTime"),
        ("DATE", "LocalDate"),
        ("TIME", "LocalTime"),
        ("BIT", "Boolean"),
        ("GEOMETRY", "String"),
    ])
    def test_default_mapping(self, sql_type, java_type):
        assert TypeMapper().java_type(_type(sql_type)) == java_type

    def test_imports(self):
        assert TypeMapper.java_import("BigDecimal") == "java.math.BigDecimal"
        assert TypeMapper.java_import("String") is None

    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "types.yaml"
        path.write_text("tinyint: Byte\nJSON: JsonNode\n", encoding="utf-8")
        mapper = TypeMapper.from_yaml(path)
        assert mapper.java_type(_type("TINYINT")) == "Byte"
        assert mapper.java_type(_type("JSON")) == "JsonNode"
        assert mapper.java_type(_type("BIGINT")) == "Long"

    def test_missing_yaml_means_no_overrides(self, tmp_path):
        mapper = TypeMapper.from_yaml(tmp_path / "absent.yaml")
        assert mapper.java_type(_type("TINYINT")) == "Integer"

    def test_invalid_yaml_raises_config_error(self, tmp_path):
        path = tmp_path / "types.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            TypeMapper.from_yaml(path)


@pytest.mark.parametrize("name, camel, pascal", [
    ("user_name", "userName", "UserName"),
    ("order_item", "orderItem", "OrderItem"),
    ("id", "id", "Id"),
    ("shop.user_info", "shop.userInfo", "UserInfo"),
])
def test_naming(name, camel, pascal):
    assert to_camel_case(name) == camel
    assert to_pascal_case(name) == pascal


class TestFileEmitter:
    def test_creates_directories_and_overwrites(self, tmp_path):
        emitter = FileEmitter(tmp_path)
        first = emitter.emit("a/b", "x.txt", "one")
        second = emitter.emit("a/b", "x.txt", "two")
        assert first == second == (tmp_path / "a" / "b" / "x.txt").resolve()
        assert second.read_text(encoding="utf-8") == "two"

    def test_failure_wraps_path(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(EmissionError) as exc_info:
            FileEmitter(tmp_path).emit("file/sub", "x.txt", "content")
        assert exc_info.value.path == tmp_path / "file" / "sub" / "x.txt"
        assert isinstance(exc_info.value.original, OSError)


def test_simplify_schema(user_sql):
    schema = simplify_schema(parse_create_tables(user_sql))
    assert schema == {
        "user": {
            "comment": "用户表",
            "fields": [
                {"name": "id", "type": "BIGINT", "comment": "主键"},
                {"name": "status", "type": "TINYINT", "comment": "状态【enum】:1-启用,2-禁用."},
                {"name": "name", "type": "VARCHAR(50)", "comment": "姓名"},
            ],
        },
    }


def test_export_schema_json(tmp_path, user_sql):
    tables = parse_create_tables(user_sql)
    path = export_schema_json(tables, "schema", str(tmp_path / "out"), FileEmitter(tmp_path))
    assert path.name == "schema.json"
    content = path.read_text(encoding="utf-8")
    assert "用户表" in content
    assert json.loads(content)["user"]["fields"][2]["name"] == "name"


class TestEntityGenerator:
    def test_generate(self, order_sql):
        orders, _ = parse_create_tables(order_sql)
        source = EntityGenerator(date(2024, 1, 31), base_package="com.demo").generate(orders)

        assert source.startswith("package com.demo.entity;")
        assert "import java.math.BigDecimal;" in source
        assert "import java.time.LocalDateTime;" in source
        assert "@since 2024-01-31" in source
        assert " * 订单表\n" in source
        assert '@TableName("orders")' in source
        assert "public class Orders {" in source
        assert '    @TableField("order_no")\n    private String orderNo;' in source
        assert "    private BigDecimal amount;" in source
        assert "    @TableLogic\n    private Integer isDeleted;" in source
        assert "     * <li>1 - 已支付</li>" in source

    def test_primary_key_id_type(self, user_sql):
        [user] = parse_create_tables(user_sql)
        source = EntityGenerator(date(2024, 1, 31)).generate(user)
        assert "    @TableId(type = IdType.AUTO)\n    private Long id;" in source
        assert "import com.baomidou.mybatisplus.annotation.TableLogic;" not in source

    def test_primary_key_without_auto_increment_is_input(self):
        [table] = parse_create_tables("CREATE TABLE code (code VARCHAR(8) PRIMARY KEY);")
        source = EntityGenerator(date(2024, 1, 31)).generate(table)
        assert "    @TableId(type = IdType.INPUT)\n    private String code;" in source

    def test_output_is_reproducible(self, user_sql):
        [user] = parse_create_tables(user_sql)
        generator = EntityGenerator(date(2024, 1, 31))
        assert generator.generate(user) == generator.generate(user)

    def test_write_all(self, tmp_path, order_sql):
        tables = parse_create_tables(order_sql)
        paths = EntityGenerator(date(2024, 1, 31)).write_all(tables, "gen", FileEmitter(tmp_path))
        assert [p.name for p in paths] == ["Orders.java", "OrderItem.java"]
        assert all(p.parent == (tmp_path / "gen" / "entity").resolve() for p in paths)

    def test_write_all_aborts_on_first_failure(self, tmp_path, order_sql):
        (tmp_path / "gen").write_text("", encoding="utf-8")
        tables = parse_create_tables(order_sql)
        with pytest.raises(EmissionError):
            EntityGenerator(date(2024, 1, 31)).write_all(tables, "gen", FileEmitter(tmp_path))
