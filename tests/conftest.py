import pytest

USER_SQL = (
    "CREATE TABLE user ("
    "id BIGINT AUTO_INCREMENT PRIMARY KEY COMMENT '主键', "
    "status TINYINT NOT NULL DEFAULT 1 COMMENT '状态【enum】:1-启用,2-禁用.', "
    "name VARCHAR(50) COMMENT '姓名', "
    "PRIMARY KEY (id)"
    ") COMMENT='用户表';"
)

ORDER_SQL = """
/* 订单模块 */
-- 订单表
CREATE TABLE IF NOT EXISTS `orders` (
  `id` bigint NOT NULL AUTO_INCREMENT COMMENT '主键ID',
  `order_no` varchar(32) NOT NULL COMMENT '订单号',
  `amount` decimal(10,2) unsigned NOT NULL DEFAULT '0.00' COMMENT '金额',
  `pay_status` tinyint NOT NULL DEFAULT 0 COMMENT '支付状态【枚举】：0-待支付，1-已支付，2-已退款。',
  `remark` varchar(255) DEFAULT 'a,b' COMMENT '备注',
  `create_time` datetime DEFAULT CURRENT_TIMESTAMP COMMENT '创建时间',
  `is_deleted` tinyint(1) DEFAULT 0 COMMENT '是否删除',
  PRIMARY KEY (`id`),
  UNIQUE KEY `uk_order_no` (`order_no`),
  KEY `idx_status` (`pay_status`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='订单表';

CREATE TABLE order_item (
  id BIGINT PRIMARY KEY,
  order_id BIGINT NOT NULL,
  CONSTRAINT fk_order FOREIGN KEY (order_id) REFERENCES orders (id)
);
"""


@pytest.fixture
def user_sql():
    return USER_SQL


@pytest.fixture
def order_sql():
    return ORDER_SQL


@pytest.fixture
def cache_path(tmp_path, monkeypatch):
    """Point SQLiteCache() at a throwaway database."""
    path = tmp_path / "schema.db"
    monkeypatch.setattr("sql_table_parser.storage.sqlite_cache.SQLITE_PATH", path)
    return path
