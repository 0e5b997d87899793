"""CocktailDB 客户端使用示例（会访问真实 API）"""
import asyncio

from cocktaildb import CocktailDBClient, ClientSettings, configure_logging


async def main():
    configure_logging(debug=True)

    async with CocktailDBClient(ClientSettings(debug=True)) as client:
        print("= 按名称搜索 =")
        drinks = await client.search("Old Fashioned")
        for drink in drinks or []:
            print(f"  {drink.get('idDrink')}: {drink.get('strDrink')}")

        print("\n= 分类列表 =")
        print(await client.categories_filter())

        print("\n= 随机一款 =")
        drink = await client.random()
        print(drink.get("strDrink") if drink else "无结果或请求失败")

        print("\n= 不存在的 ID =")
        print(await client.search_by_id(0))


if __name__ == "__main__":
    asyncio.run(main())
