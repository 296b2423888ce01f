import pytest

from sql_table_parser.errors import NoTableFound, ParseError
from sql_table_parser.extractors import StatementExtractor, strip_comments


def test_strip_comments():
    sql = "/* block\n comment */ CREATE TABLE t (a INT); -- trailing\n-- whole line"
    assert strip_comments(sql).strip() == "CREATE TABLE t (a INT);"


def test_extracts_name_body_and_comment(user_sql):
    [stmt] = StatementExtractor().extract(user_sql)
    assert stmt.table_name == "user"
    assert stmt.table_comment == "用户表"
    assert stmt.fields_section.startswith("id BIGINT")
    assert stmt.fields_section.endswith("PRIMARY KEY (id)")


def test_multiple_statements_in_source_order(order_sql):
    statements = StatementExtractor().extract(order_sql)
    assert [s.table_name for s in statements] == ["orders", "order_item"]
    assert statements[0].table_comment == "订单表"
    assert statements[1].table_comment == ""


def test_table_options_before_comment():
    sql = "CREATE TABLE t (a INT) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT 'demo; table';"
    [stmt] = StatementExtractor().extract(sql)
    assert stmt.table_comment == "demo; table"


def test_case_insensitive_and_quoted_schema_name():
    sql = 'create temporary table if not exists `shop`.`goods` (a int);'
    [stmt] = StatementExtractor().extract(sql)
    assert stmt.table_name == "shop.goods"
    assert stmt.fields_section == "a int"


def test_missing_semicolon_between_statements():
    sql = "CREATE TABLE a (x INT)\nCREATE TABLE b (y INT);"
    statements = StatementExtractor().extract(sql)
    assert [s.table_name for s in statements] == ["a", "b"]


def test_unterminated_body_is_skipped():
    sql = "CREATE TABLE broken (a INT; CREATE TABLE ok (b INT);"
    statements = StatementExtractor().extract(sql)
    assert [s.table_name for s in statements] == ["ok"]


@pytest.mark.parametrize("sql", ["", "SELECT 1;", "-- CREATE TABLE t (a INT);"])
def test_no_table_found(sql):
    with pytest.raises(NoTableFound) as exc_info:
        StatementExtractor().extract(sql)
    assert isinstance(exc_info.value, ParseError)
    assert exc_info.value.suggestion


def test_table_comment_with_doubled_quotes():
    sql = "CREATE TABLE t (a INT COMMENT 'it''s') COMMENT='user''s table';"
    [stmt] = StatementExtractor().extract(sql)
    assert stmt.table_comment == "user's table"


def test_table_comment_in_double_quotes():
    [stmt] = StatementExtractor().extract('CREATE TABLE t (a INT) COMMENT = "say ""hi""";')
    assert stmt.table_comment == 'say "hi"'
