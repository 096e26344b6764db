"""
Adapter 範例：商品目錄
讓只認得舊介面（字串清單）的客戶端使用新的商品服務
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..constants import AdapterStrings


@dataclass(frozen=True)
class Product:
    name: str


class OldProductsInterface(ABC):
    """客戶端期待的舊介面"""

    @abstractmethod
    def get_products(self) -> List[str]:
        pass


class NewProductsService:
    """新的商品服務（回傳 Product 物件）"""

    def fetch_products(self) -> List[Product]:
        return [Product(name="Apple"), Product(name="Banana")]


class ProductsAdapter(OldProductsInterface):
    def __init__(self, new_products_service: NewProductsService):
        self._service = new_products_service

    def get_products(self) -> List[str]:
        # 轉換成客戶端期待的格式
        return [product.name for product in self._service.fetch_products()]


class ProductsClient:
    def __init__(self, service: OldProductsInterface):
        self._service = service

    def print_products(self) -> str:
        products = self._service.get_products()
        line = AdapterStrings.AVAILABLE.format(
            products=AdapterStrings.SEPARATOR.join(products)
        )
        print(line)
        return line


def demo() -> str:
    adapter = ProductsAdapter(NewProductsService())
    client = ProductsClient(adapter)
    return client.print_products()


if __name__ == "__main__":
    demo()
