"""Default contents for collections that start out non-empty."""

DEFAULT_MENU = {
    "categories": [
        {"id": 1, "name": "热菜", "description": "精选热菜系列"},
        {"id": 2, "name": "凉菜", "description": "清爽凉菜系列"},
        {"id": 3, "name": "汤品", "description": "营养汤品系列"},
    ],
    "dishes": [
        {
            "id": 1,
            "categoryId": 1,
            "name": "宫保鸡丁",
            "description": "经典川菜，鸡肉嫩滑，花生香脆",
            "image": "https://images.unsplash.com/photo-1565299624946-b28f40a0ca4b?w=400&h=300&fit=crop",
            "customizations": {
                "doneness": [],
                "sauces": ["蒜蓉酱", "黑椒酱"],
                "spiciness": ["不辣", "微辣", "中辣", "特辣"],
                "extras": ["加蛋", "加蔬菜"],
            },
        }
    ],
}

DEFAULT_REGIONS = ["南京", "杭州"]
