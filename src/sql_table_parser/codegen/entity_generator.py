"""Generate Lombok / MyBatis-Plus entity classes from parsed tables."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_BASE_PACKAGE
from ..extractors.schema import Column, Table
from .emitter import FileEmitter
from .naming import to_camel_case, to_pascal_case
from .type_mapping import TypeMapper

logger = logging.getLogger(__name__)

LOGIC_DELETE_COLUMN = "is_deleted"
AUTHOR = "系统生成"


def _javadoc_text(text: str) -> str:
    return text.replace("*/", "*&#47;")


class EntityGenerator:
    """Render one Java entity class per table.

    `generated_at` goes into the `@since` tag; it is always supplied by the
    caller so that output is reproducible.
    """

    def __init__(
        self,
        generated_at: date,
        base_package: str = DEFAULT_BASE_PACKAGE,
        type_mapper: Optional[TypeMapper] = None,
    ):
        self.generated_at = generated_at
        self.base_package = base_package
        self.type_mapper = type_mapper or TypeMapper()

    def class_name(self, table: Table) -> str:
        return to_pascal_case(table.name)

    def generate(self, table: Table) -> str:
        """Return the Java source of the entity for `table`."""
        imports = {"lombok.Data", "com.baomidou.mybatisplus.annotation.TableName"}
        fields = []

        for column in table.columns:
            java_type = self.type_mapper.java_type(column.type)
            java_import = self.type_mapper.java_import(java_type)
            if java_import:
                imports.add(java_import)

            if column.primary_key:
                imports.update({
                    "com.baomidou.mybatisplus.annotation.TableId",
                    "com.baomidou.mybatisplus.annotation.IdType",
                })
            else:
                imports.add("com.baomidou.mybatisplus.annotation.TableField")
            if column.name == LOGIC_DELETE_COLUMN:
                imports.add("com.baomidou.mybatisplus.annotation.TableLogic")

            fields.append(self._field_code(column, java_type))

        import_lines = "\n".join(f"import {imp};" for imp in sorted(imports))
        description = _javadoc_text(table.comment or f"{table.name}表实体类")

        return f"""package {self.base_package}.entity;

{import_lines}

/**
 * {description}
 *
 * @author {AUTHOR}
 * @since {self.generated_at:%Y-%m-%d}
 */
@Data
@TableName("{table.name}")
public class {self.class_name(table)} {{

{chr(10).join(fields)}
}}
"""

    def _field_code(self, column: Column, java_type: str) -> str:
        lines = []
        if column.comment or column.enum_values:
            lines.append("    /**")
            if column.comment:
                lines.append(f"     * {_javadoc_text(column.comment)}")
            for item in column.enum_values or ():
                lines.append(f"     * <li>{item.value} - {_javadoc_text(item.label)}</li>")
            lines.append("     */")

        if column.primary_key:
            id_type = "AUTO" if column.auto_increment else "INPUT"
            lines.append(f"    @TableId(type = IdType.{id_type})")
        else:
            lines.append(f'    @TableField("{column.name}")')

        if column.name == LOGIC_DELETE_COLUMN:
            lines.append("    @TableLogic")

        lines.append(f"    private {java_type} {to_camel_case(column.name)};")
        lines.append("")
        return "\n".join(lines)

    def write_all(
        self,
        tables: list[Table],
        output_path: str,
        emitter: Optional[FileEmitter] = None,
    ) -> list[Path]:
        """Write `<output_path>/entity/<ClassName>.java` for every table.

        The first failed write aborts the remaining tables.

        Raises:
            EmissionError: If a file cannot be written.
        """
        emitter = emitter or FileEmitter()
        directory = Path(output_path) / "entity"
        written = []
        for table in tables:
            path = emitter.emit(directory, f"{self.class_name(table)}.java", self.generate(table))
            written.append(path)
        logger.info("Generated %d entity class(es) under %s", len(written), directory)
        return written
